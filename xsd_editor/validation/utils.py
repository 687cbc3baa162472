# xsd_editor/validation/utils.py
"""
Shared validation utilities for command validators.
"""

import re
from typing import Any, Optional

from pydantic import BaseModel

from xsd_editor.addressing import is_root_address, parse_address
from xsd_editor.errors import FormatError

# Plain ASCII names only; namespace prefixes and non-ASCII letters are not
# accepted for declared names.
_XML_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_.\-]*")
_TYPE_REFERENCE_RE = re.compile(r"(?:[A-Za-z_][A-Za-z0-9_.\-]*:)?[A-Za-z_][A-Za-z0-9_.\-]*")

UNBOUNDED = "unbounded"


class ValidationResult(BaseModel):
    valid: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True)

    @classmethod
    def fail(cls, error: str) -> "ValidationResult":
        return cls(valid=False, error=error)


def is_valid_xml_name(name: Optional[str]) -> bool:
    if not name or not name.strip():
        return False
    return _XML_NAME_RE.fullmatch(name) is not None


def is_valid_type_reference(type_name: Optional[str]) -> bool:
    """A type reference is an XML name, optionally prefixed (e.g. 'xs:string')."""
    if not type_name or not type_name.strip():
        return False
    return _TYPE_REFERENCE_RE.fullmatch(type_name) is not None


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_well_formed_address(address: str) -> bool:
    try:
        parse_address(address)
    except FormatError:
        return False
    return True


def is_valid_parent_address(address: str) -> bool:
    """A parent is any well-formed address or the root alias."""
    return is_root_address(address) or is_well_formed_address(address)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_integral(value: Any) -> bool:
    if isinstance(value, int):
        return True
    return value.is_integer()


def validate_min_occurs(min_occurs: Any) -> ValidationResult:
    if min_occurs is None:
        return ValidationResult.ok()

    if not _is_number(min_occurs):
        return ValidationResult.fail("minOccurs must be an integer")
    if min_occurs < 0:
        return ValidationResult.fail("minOccurs must be a non-negative integer")
    if not _is_integral(min_occurs):
        return ValidationResult.fail("minOccurs must be an integer")

    return ValidationResult.ok()


def validate_max_occurs(max_occurs: Any) -> ValidationResult:
    if max_occurs is None or max_occurs == UNBOUNDED:
        return ValidationResult.ok()

    if not _is_number(max_occurs):
        return ValidationResult.fail("maxOccurs must be a non-negative integer or 'unbounded'")
    if max_occurs < 0:
        return ValidationResult.fail("maxOccurs must be a non-negative integer or 'unbounded'")
    if not _is_integral(max_occurs):
        return ValidationResult.fail("maxOccurs must be an integer or 'unbounded'")

    return ValidationResult.ok()


def validate_occurrence_constraint(min_occurs: Any, max_occurs: Any) -> ValidationResult:
    """minOccurs <= maxOccurs when both are numeric; 'unbounded' always satisfies it."""
    if min_occurs is not None and _is_number(max_occurs) and min_occurs > max_occurs:
        return ValidationResult.fail("minOccurs must be <= maxOccurs")
    return ValidationResult.ok()


def validate_occurrences(min_occurs: Any, max_occurs: Any) -> ValidationResult:
    min_result = validate_min_occurs(min_occurs)
    if not min_result.valid:
        return min_result

    max_result = validate_max_occurs(max_occurs)
    if not max_result.valid:
        return max_result

    return validate_occurrence_constraint(min_occurs, max_occurs)
