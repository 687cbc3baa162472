# xsd_editor/commands/attribute.py
"""
Attribute commands. Mirrors the element family: named (attributeName +
attributeType) or a reference (ref). A reference carries no default or
fixed value; the required flag is allowed in both forms.
"""

from typing import Literal, Optional

from xsd_editor.commands.base import BaseCommand, WireModel


class AddAttributePayload(WireModel):
    parent_id: str
    attribute_name: Optional[str] = None
    attribute_type: Optional[str] = None
    ref: Optional[str] = None
    required: Optional[bool] = None
    default_value: Optional[str] = None
    fixed_value: Optional[str] = None
    documentation: Optional[str] = None


class AddAttributeCommand(BaseCommand):
    type: Literal["addAttribute"] = "addAttribute"
    payload: AddAttributePayload


class RemoveAttributePayload(WireModel):
    attribute_id: str


class RemoveAttributeCommand(BaseCommand):
    type: Literal["removeAttribute"] = "removeAttribute"
    payload: RemoveAttributePayload


class ModifyAttributePayload(WireModel):
    attribute_id: str
    attribute_name: Optional[str] = None
    attribute_type: Optional[str] = None
    ref: Optional[str] = None
    required: Optional[bool] = None
    default_value: Optional[str] = None
    fixed_value: Optional[str] = None
    documentation: Optional[str] = None


class ModifyAttributeCommand(BaseCommand):
    type: Literal["modifyAttribute"] = "modifyAttribute"
    payload: ModifyAttributePayload
