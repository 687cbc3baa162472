# xsd_editor/validation/group_validators.py
"""
Validators for group and attribute group commands.
"""

from xsd_editor.commands import (
    AddGroupCommand,
    RemoveGroupCommand,
    ModifyGroupCommand,
    AddAttributeGroupCommand,
    RemoveAttributeGroupCommand,
    ModifyAttributeGroupCommand,
)
from xsd_editor.validation.type_validators import validate_content_model
from xsd_editor.validation.utils import ValidationResult, is_blank, is_valid_xml_name


def validate_add_group(command: AddGroupCommand) -> ValidationResult:
    p = command.payload
    if not is_valid_xml_name(p.group_name):
        return ValidationResult.fail("Group name must be a valid XML name")
    return validate_content_model(p.content_model)


def validate_remove_group(command: RemoveGroupCommand) -> ValidationResult:
    if is_blank(command.payload.group_id):
        return ValidationResult.fail("Group ID cannot be empty")
    return ValidationResult.ok()


def validate_modify_group(command: ModifyGroupCommand) -> ValidationResult:
    p = command.payload
    if is_blank(p.group_id):
        return ValidationResult.fail("Group ID cannot be empty")
    if p.group_name is not None and not is_valid_xml_name(p.group_name):
        return ValidationResult.fail("Group name must be a valid XML name")
    if p.content_model is not None:
        return validate_content_model(p.content_model)
    return ValidationResult.ok()


# --- AttributeGroup ---

def validate_add_attribute_group(command: AddAttributeGroupCommand) -> ValidationResult:
    if not is_valid_xml_name(command.payload.group_name):
        return ValidationResult.fail("Attribute group name must be a valid XML name")
    return ValidationResult.ok()


def validate_remove_attribute_group(command: RemoveAttributeGroupCommand) -> ValidationResult:
    if is_blank(command.payload.group_id):
        return ValidationResult.fail("Attribute group ID cannot be empty")
    return ValidationResult.ok()


def validate_modify_attribute_group(command: ModifyAttributeGroupCommand) -> ValidationResult:
    p = command.payload
    if is_blank(p.group_id):
        return ValidationResult.fail("Attribute group ID cannot be empty")
    if p.group_name is not None and not is_valid_xml_name(p.group_name):
        return ValidationResult.fail("Attribute group name must be a valid XML name")
    return ValidationResult.ok()
