# xsd_editor/validation/annotation_validators.py
"""
Validators for annotation and documentation commands.
"""

from xsd_editor.commands import (
    AddAnnotationCommand,
    RemoveAnnotationCommand,
    ModifyAnnotationCommand,
    AddDocumentationCommand,
    RemoveDocumentationCommand,
    ModifyDocumentationCommand,
)
from xsd_editor.validation.utils import ValidationResult, is_blank


def validate_add_annotation(command: AddAnnotationCommand) -> ValidationResult:
    if is_blank(command.payload.target_id):
        return ValidationResult.fail("Target ID cannot be empty")
    return ValidationResult.ok()


def validate_remove_annotation(command: RemoveAnnotationCommand) -> ValidationResult:
    if is_blank(command.payload.annotation_id):
        return ValidationResult.fail("Annotation ID cannot be empty")
    return ValidationResult.ok()


def validate_modify_annotation(command: ModifyAnnotationCommand) -> ValidationResult:
    if is_blank(command.payload.annotation_id):
        return ValidationResult.fail("Annotation ID cannot be empty")
    return ValidationResult.ok()


def validate_add_documentation(command: AddDocumentationCommand) -> ValidationResult:
    p = command.payload
    if is_blank(p.target_id):
        return ValidationResult.fail("Target ID cannot be empty")
    if is_blank(p.content):
        return ValidationResult.fail("Documentation content cannot be empty")
    return ValidationResult.ok()


def validate_remove_documentation(command: RemoveDocumentationCommand) -> ValidationResult:
    if is_blank(command.payload.documentation_id):
        return ValidationResult.fail("Documentation ID cannot be empty")
    return ValidationResult.ok()


def validate_modify_documentation(command: ModifyDocumentationCommand) -> ValidationResult:
    if is_blank(command.payload.documentation_id):
        return ValidationResult.fail("Documentation ID cannot be empty")
    return ValidationResult.ok()
