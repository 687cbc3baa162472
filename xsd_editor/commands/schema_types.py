# xsd_editor/commands/schema_types.py
"""
Type commands for named simple and complex type definitions.
"""

from typing import List, Literal, Optional

from xsd_editor.commands.base import BaseCommand, WireModel


class RestrictionFacets(WireModel):
    """Standard restriction facets of a simple type. Pure value, no behaviour."""
    min_inclusive: Optional[str] = None
    max_inclusive: Optional[str] = None
    min_exclusive: Optional[str] = None
    max_exclusive: Optional[str] = None
    length: Optional[int] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[str] = None
    enumeration: Optional[List[str]] = None
    white_space: Optional[Literal["preserve", "replace", "collapse"]] = None
    total_digits: Optional[int] = None
    fraction_digits: Optional[int] = None


# --- Simple types ---

class AddSimpleTypePayload(WireModel):
    type_name: str
    base_type: str
    restrictions: Optional[RestrictionFacets] = None
    documentation: Optional[str] = None


class AddSimpleTypeCommand(BaseCommand):
    type: Literal["addSimpleType"] = "addSimpleType"
    payload: AddSimpleTypePayload


class RemoveSimpleTypePayload(WireModel):
    type_id: str


class RemoveSimpleTypeCommand(BaseCommand):
    type: Literal["removeSimpleType"] = "removeSimpleType"
    payload: RemoveSimpleTypePayload


class ModifySimpleTypePayload(WireModel):
    type_id: str
    type_name: Optional[str] = None
    base_type: Optional[str] = None
    restrictions: Optional[RestrictionFacets] = None
    documentation: Optional[str] = None


class ModifySimpleTypeCommand(BaseCommand):
    type: Literal["modifySimpleType"] = "modifySimpleType"
    payload: ModifySimpleTypePayload


# --- Complex types ---

class AddComplexTypePayload(WireModel):
    type_name: str
    # One of ContentModel; checked by the validation rules.
    content_model: str
    abstract: Optional[bool] = None
    base_type: Optional[str] = None
    mixed: Optional[bool] = None
    documentation: Optional[str] = None


class AddComplexTypeCommand(BaseCommand):
    type: Literal["addComplexType"] = "addComplexType"
    payload: AddComplexTypePayload


class RemoveComplexTypePayload(WireModel):
    type_id: str


class RemoveComplexTypeCommand(BaseCommand):
    type: Literal["removeComplexType"] = "removeComplexType"
    payload: RemoveComplexTypePayload


class ModifyComplexTypePayload(WireModel):
    type_id: str
    type_name: Optional[str] = None
    content_model: Optional[str] = None
    abstract: Optional[bool] = None
    base_type: Optional[str] = None
    mixed: Optional[bool] = None
    documentation: Optional[str] = None


class ModifyComplexTypeCommand(BaseCommand):
    type: Literal["modifyComplexType"] = "modifyComplexType"
    payload: ModifyComplexTypePayload
