# xsd_editor/validation/__init__.py
from xsd_editor.validation.utils import (
    UNBOUNDED,
    ValidationResult,
    is_valid_type_reference,
    is_valid_xml_name,
    validate_max_occurs,
    validate_min_occurs,
    validate_occurrence_constraint,
    validate_occurrences,
)
from xsd_editor.validation.validator import VALIDATORS, CommandValidator

__all__ = [
    "UNBOUNDED",
    "ValidationResult",
    "is_valid_type_reference",
    "is_valid_xml_name",
    "validate_max_occurs",
    "validate_min_occurs",
    "validate_occurrence_constraint",
    "validate_occurrences",
    "VALIDATORS",
    "CommandValidator",
]
