# xsd_editor/validation/validator.py
"""
CommandValidator: validates commands before execution.

Validation is purely syntactic: XML name syntax, occurrence constraints,
content model membership and required-field presence. Existence of the
addressed nodes, duplicate names and type resolution are decided by the
executor that owns the document tree.
"""

import logging
from typing import Callable, Dict

from xsd_editor.commands import BaseCommand, CommandType
from xsd_editor.validation.annotation_validators import (
    validate_add_annotation,
    validate_remove_annotation,
    validate_modify_annotation,
    validate_add_documentation,
    validate_remove_documentation,
    validate_modify_documentation,
)
from xsd_editor.validation.element_validators import (
    validate_add_element,
    validate_remove_element,
    validate_modify_element,
    validate_add_attribute,
    validate_remove_attribute,
    validate_modify_attribute,
)
from xsd_editor.validation.group_validators import (
    validate_add_group,
    validate_remove_group,
    validate_modify_group,
    validate_add_attribute_group,
    validate_remove_attribute_group,
    validate_modify_attribute_group,
)
from xsd_editor.validation.schema_validators import (
    validate_add_import,
    validate_remove_import,
    validate_modify_import,
    validate_add_include,
    validate_remove_include,
    validate_modify_include,
)
from xsd_editor.validation.type_validators import (
    validate_add_simple_type,
    validate_remove_simple_type,
    validate_modify_simple_type,
    validate_add_complex_type,
    validate_remove_complex_type,
    validate_modify_complex_type,
)
from xsd_editor.validation.utils import ValidationResult

logger = logging.getLogger(__name__)

Validator = Callable[[BaseCommand], ValidationResult]

VALIDATORS: Dict[CommandType, Validator] = {
    CommandType.ADD_ELEMENT: validate_add_element,
    CommandType.REMOVE_ELEMENT: validate_remove_element,
    CommandType.MODIFY_ELEMENT: validate_modify_element,
    CommandType.ADD_ATTRIBUTE: validate_add_attribute,
    CommandType.REMOVE_ATTRIBUTE: validate_remove_attribute,
    CommandType.MODIFY_ATTRIBUTE: validate_modify_attribute,
    CommandType.ADD_SIMPLE_TYPE: validate_add_simple_type,
    CommandType.REMOVE_SIMPLE_TYPE: validate_remove_simple_type,
    CommandType.MODIFY_SIMPLE_TYPE: validate_modify_simple_type,
    CommandType.ADD_COMPLEX_TYPE: validate_add_complex_type,
    CommandType.REMOVE_COMPLEX_TYPE: validate_remove_complex_type,
    CommandType.MODIFY_COMPLEX_TYPE: validate_modify_complex_type,
    CommandType.ADD_GROUP: validate_add_group,
    CommandType.REMOVE_GROUP: validate_remove_group,
    CommandType.MODIFY_GROUP: validate_modify_group,
    CommandType.ADD_ATTRIBUTE_GROUP: validate_add_attribute_group,
    CommandType.REMOVE_ATTRIBUTE_GROUP: validate_remove_attribute_group,
    CommandType.MODIFY_ATTRIBUTE_GROUP: validate_modify_attribute_group,
    CommandType.ADD_ANNOTATION: validate_add_annotation,
    CommandType.REMOVE_ANNOTATION: validate_remove_annotation,
    CommandType.MODIFY_ANNOTATION: validate_modify_annotation,
    CommandType.ADD_DOCUMENTATION: validate_add_documentation,
    CommandType.REMOVE_DOCUMENTATION: validate_remove_documentation,
    CommandType.MODIFY_DOCUMENTATION: validate_modify_documentation,
    CommandType.ADD_IMPORT: validate_add_import,
    CommandType.REMOVE_IMPORT: validate_remove_import,
    CommandType.MODIFY_IMPORT: validate_modify_import,
    CommandType.ADD_INCLUDE: validate_add_include,
    CommandType.REMOVE_INCLUDE: validate_remove_include,
    CommandType.MODIFY_INCLUDE: validate_modify_include,
}

_missing = set(CommandType) - set(VALIDATORS)
if _missing:
    raise RuntimeError(f"Validators missing for: {sorted(t.value for t in _missing)}")


class CommandValidator:
    def validate(self, command: BaseCommand) -> ValidationResult:
        try:
            command_type = CommandType(command.type)
        except ValueError:
            return ValidationResult.fail(f"Unknown command type: {command.type}")

        result = VALIDATORS[command_type](command)
        if not result.valid:
            logger.info(f"Command {command_type.value} rejected: {result.error}")
        return result
