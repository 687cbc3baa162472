# xsd_editor/validation/schema_validators.py
"""
Validators for schema-level commands (import and include).
"""

from xsd_editor.commands import (
    AddImportCommand,
    RemoveImportCommand,
    ModifyImportCommand,
    AddIncludeCommand,
    RemoveIncludeCommand,
    ModifyIncludeCommand,
)
from xsd_editor.validation.utils import ValidationResult, is_blank


def validate_add_import(command: AddImportCommand) -> ValidationResult:
    p = command.payload
    if is_blank(p.namespace):
        return ValidationResult.fail("Namespace cannot be empty")
    if is_blank(p.schema_location):
        return ValidationResult.fail("Schema location cannot be empty")
    return ValidationResult.ok()


def validate_remove_import(command: RemoveImportCommand) -> ValidationResult:
    if is_blank(command.payload.import_id):
        return ValidationResult.fail("Import ID cannot be empty")
    return ValidationResult.ok()


def validate_modify_import(command: ModifyImportCommand) -> ValidationResult:
    p = command.payload
    if is_blank(p.import_id):
        return ValidationResult.fail("Import ID cannot be empty")
    if p.namespace is not None and is_blank(p.namespace):
        return ValidationResult.fail("Namespace cannot be empty")
    if p.schema_location is not None and is_blank(p.schema_location):
        return ValidationResult.fail("Schema location cannot be empty")
    return ValidationResult.ok()


def validate_add_include(command: AddIncludeCommand) -> ValidationResult:
    if is_blank(command.payload.schema_location):
        return ValidationResult.fail("Schema location cannot be empty")
    return ValidationResult.ok()


def validate_remove_include(command: RemoveIncludeCommand) -> ValidationResult:
    if is_blank(command.payload.include_id):
        return ValidationResult.fail("Include ID cannot be empty")
    return ValidationResult.ok()


def validate_modify_include(command: ModifyIncludeCommand) -> ValidationResult:
    p = command.payload
    if is_blank(p.include_id):
        return ValidationResult.fail("Include ID cannot be empty")
    if p.schema_location is not None and is_blank(p.schema_location):
        return ValidationResult.fail("Schema location cannot be empty")
    return ValidationResult.ok()
