# xsd_editor/validation/type_validators.py
"""
Validators for simple type and complex type commands.
"""

from xsd_editor.commands import (
    AddSimpleTypeCommand,
    RemoveSimpleTypeCommand,
    ModifySimpleTypeCommand,
    AddComplexTypeCommand,
    RemoveComplexTypeCommand,
    ModifyComplexTypeCommand,
    VALID_CONTENT_MODELS,
)
from xsd_editor.validation.utils import (
    ValidationResult,
    is_blank,
    is_valid_type_reference,
    is_valid_xml_name,
)


def validate_content_model(content_model) -> ValidationResult:
    if is_blank(content_model):
        return ValidationResult.fail("Content model is required")
    if content_model not in VALID_CONTENT_MODELS:
        return ValidationResult.fail(f"Content model must be one of: {', '.join(VALID_CONTENT_MODELS)}")
    return ValidationResult.ok()


# --- SimpleType ---

def validate_add_simple_type(command: AddSimpleTypeCommand) -> ValidationResult:
    p = command.payload
    if not is_valid_xml_name(p.type_name):
        return ValidationResult.fail("Type name must be a valid XML name")
    if is_blank(p.base_type):
        return ValidationResult.fail("Base type is required")
    if not is_valid_type_reference(p.base_type):
        return ValidationResult.fail(f"Invalid base type: {p.base_type}")
    return ValidationResult.ok()


def validate_remove_simple_type(command: RemoveSimpleTypeCommand) -> ValidationResult:
    if is_blank(command.payload.type_id):
        return ValidationResult.fail("Type ID cannot be empty")
    return ValidationResult.ok()


def validate_modify_simple_type(command: ModifySimpleTypeCommand) -> ValidationResult:
    p = command.payload
    if is_blank(p.type_id):
        return ValidationResult.fail("Type ID cannot be empty")
    if p.type_name is not None and not is_valid_xml_name(p.type_name):
        return ValidationResult.fail("Type name must be a valid XML name")
    if p.base_type is not None and not is_valid_type_reference(p.base_type):
        return ValidationResult.fail(f"Invalid base type: {p.base_type}")
    return ValidationResult.ok()


# --- ComplexType ---

def validate_add_complex_type(command: AddComplexTypeCommand) -> ValidationResult:
    p = command.payload
    if not is_valid_xml_name(p.type_name):
        return ValidationResult.fail("Type name must be a valid XML name")
    result = validate_content_model(p.content_model)
    if not result.valid:
        return result
    if p.base_type is not None and not is_valid_type_reference(p.base_type):
        return ValidationResult.fail(f"Invalid base type: {p.base_type}")
    return ValidationResult.ok()


def validate_remove_complex_type(command: RemoveComplexTypeCommand) -> ValidationResult:
    if is_blank(command.payload.type_id):
        return ValidationResult.fail("Type ID cannot be empty")
    return ValidationResult.ok()


def validate_modify_complex_type(command: ModifyComplexTypeCommand) -> ValidationResult:
    p = command.payload
    if is_blank(p.type_id):
        return ValidationResult.fail("Type ID cannot be empty")
    if p.type_name is not None and not is_valid_xml_name(p.type_name):
        return ValidationResult.fail("Type name must be a valid XML name")
    if p.content_model is not None:
        result = validate_content_model(p.content_model)
        if not result.valid:
            return result
    if p.base_type is not None and not is_valid_type_reference(p.base_type):
        return ValidationResult.fail(f"Invalid base type: {p.base_type}")
    return ValidationResult.ok()
