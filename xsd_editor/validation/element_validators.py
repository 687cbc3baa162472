# xsd_editor/validation/element_validators.py
"""
Validators for element and attribute commands.

Only what can be decided from the command itself is checked here. Whether a
parent exists, or whether a ref points at a real top-level declaration, is
left to the executor that owns the document tree.
"""

from xsd_editor.addressing import is_root_address
from xsd_editor.commands import (
    AddElementCommand,
    RemoveElementCommand,
    ModifyElementCommand,
    AddAttributeCommand,
    RemoveAttributeCommand,
    ModifyAttributeCommand,
)
from xsd_editor.validation.utils import (
    ValidationResult,
    is_blank,
    is_valid_type_reference,
    is_valid_xml_name,
    is_valid_parent_address,
    is_well_formed_address,
    validate_occurrences,
)


def validate_add_element(command: AddElementCommand) -> ValidationResult:
    p = command.payload

    if is_blank(p.parent_id):
        return ValidationResult.fail("Parent ID cannot be empty")
    if not is_valid_parent_address(p.parent_id):
        return ValidationResult.fail(f"Invalid parent ID: {p.parent_id}")

    if p.ref is not None:
        if p.element_name is not None or p.element_type is not None:
            return ValidationResult.fail("A reference element cannot have a name or type")
        if not is_valid_xml_name(p.ref):
            return ValidationResult.fail("Element ref must be a valid XML name")
        if is_root_address(p.parent_id):
            return ValidationResult.fail("Top-level elements cannot be references")
    else:
        if not is_valid_xml_name(p.element_name):
            return ValidationResult.fail("Element name must be a valid XML name")
        if is_blank(p.element_type):
            return ValidationResult.fail("Element type is required")
        if not is_valid_type_reference(p.element_type):
            return ValidationResult.fail(f"Invalid element type: {p.element_type}")

    return validate_occurrences(p.min_occurs, p.max_occurs)


def validate_remove_element(command: RemoveElementCommand) -> ValidationResult:
    element_id = command.payload.element_id
    if is_blank(element_id):
        return ValidationResult.fail("Element ID cannot be empty")
    if not is_well_formed_address(element_id):
        return ValidationResult.fail(f"Invalid element ID: {element_id}")
    return ValidationResult.ok()


def validate_modify_element(command: ModifyElementCommand) -> ValidationResult:
    p = command.payload

    if is_blank(p.element_id):
        return ValidationResult.fail("Element ID cannot be empty")
    if not is_well_formed_address(p.element_id):
        return ValidationResult.fail(f"Invalid element ID: {p.element_id}")

    if p.ref is not None:
        if p.element_name is not None or p.element_type is not None:
            return ValidationResult.fail("Cannot set both ref and name/type on an element")
        if not is_valid_xml_name(p.ref):
            return ValidationResult.fail("Element ref must be a valid XML name")
    else:
        if p.element_name is not None and not is_valid_xml_name(p.element_name):
            return ValidationResult.fail("Element name must be a valid XML name")
        if p.element_type is not None and not is_valid_type_reference(p.element_type):
            return ValidationResult.fail(f"Invalid element type: {p.element_type}")

    return validate_occurrences(p.min_occurs, p.max_occurs)


# --- Attribute Command Validation ---

def validate_add_attribute(command: AddAttributeCommand) -> ValidationResult:
    p = command.payload

    if is_blank(p.parent_id):
        return ValidationResult.fail("Parent ID cannot be empty")
    if not is_valid_parent_address(p.parent_id):
        return ValidationResult.fail(f"Invalid parent ID: {p.parent_id}")

    if p.ref is not None:
        if p.attribute_name is not None or p.attribute_type is not None:
            return ValidationResult.fail("A reference attribute cannot have a name or type")
        if p.default_value is not None or p.fixed_value is not None:
            return ValidationResult.fail("A reference attribute cannot have a default or fixed value")
        if not is_valid_xml_name(p.ref):
            return ValidationResult.fail("Attribute ref must be a valid XML name")
        if is_root_address(p.parent_id):
            return ValidationResult.fail("Top-level attributes cannot be references")
        return ValidationResult.ok()

    if not is_valid_xml_name(p.attribute_name):
        return ValidationResult.fail("Attribute name must be a valid XML name")
    if p.attribute_type is not None and not is_valid_type_reference(p.attribute_type):
        return ValidationResult.fail(f"Invalid attribute type: {p.attribute_type}")
    if p.default_value is not None and p.fixed_value is not None:
        return ValidationResult.fail("An attribute cannot have both a default value and a fixed value")

    return ValidationResult.ok()


def validate_remove_attribute(command: RemoveAttributeCommand) -> ValidationResult:
    attribute_id = command.payload.attribute_id
    if is_blank(attribute_id):
        return ValidationResult.fail("Attribute ID cannot be empty")
    if not is_well_formed_address(attribute_id):
        return ValidationResult.fail(f"Invalid attribute ID: {attribute_id}")
    return ValidationResult.ok()


def validate_modify_attribute(command: ModifyAttributeCommand) -> ValidationResult:
    p = command.payload

    if is_blank(p.attribute_id):
        return ValidationResult.fail("Attribute ID cannot be empty")
    if not is_well_formed_address(p.attribute_id):
        return ValidationResult.fail(f"Invalid attribute ID: {p.attribute_id}")

    if p.ref is not None:
        if p.attribute_name is not None or p.attribute_type is not None:
            return ValidationResult.fail("Cannot set both ref and name/type on an attribute")
        if p.default_value is not None or p.fixed_value is not None:
            return ValidationResult.fail("A reference attribute cannot have a default or fixed value")
        if not is_valid_xml_name(p.ref):
            return ValidationResult.fail("Attribute ref must be a valid XML name")
        return ValidationResult.ok()

    if p.attribute_name is not None and not is_valid_xml_name(p.attribute_name):
        return ValidationResult.fail("Attribute name must be a valid XML name")
    if p.attribute_type is not None and not is_valid_type_reference(p.attribute_type):
        return ValidationResult.fail(f"Invalid attribute type: {p.attribute_type}")
    if p.default_value is not None and p.fixed_value is not None:
        return ValidationResult.fail("An attribute cannot have both a default value and a fixed value")

    return ValidationResult.ok()
