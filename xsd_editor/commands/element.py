# xsd_editor/commands/element.py
"""
Element commands: add, remove and modify schema elements.
An element is either named (elementName + elementType) or a reference
(ref) to an existing top-level element; the two forms are exclusive.
"""

from typing import Literal, Optional, Union

from xsd_editor.commands.base import BaseCommand, WireModel

# Numbers are kept loose here so that a bad occurrence value reaches the
# validation rules instead of failing at decode time.
MinOccurs = Union[int, float]
MaxOccurs = Union[int, float, str]


class AddElementPayload(WireModel):
    parent_id: str
    element_name: Optional[str] = None
    element_type: Optional[str] = None
    ref: Optional[str] = None
    min_occurs: Optional[MinOccurs] = None
    max_occurs: Optional[MaxOccurs] = None
    documentation: Optional[str] = None


class AddElementCommand(BaseCommand):
    type: Literal["addElement"] = "addElement"
    payload: AddElementPayload


class RemoveElementPayload(WireModel):
    element_id: str


class RemoveElementCommand(BaseCommand):
    type: Literal["removeElement"] = "removeElement"
    payload: RemoveElementPayload


class ModifyElementPayload(WireModel):
    element_id: str
    element_name: Optional[str] = None
    element_type: Optional[str] = None
    ref: Optional[str] = None
    min_occurs: Optional[MinOccurs] = None
    max_occurs: Optional[MaxOccurs] = None
    documentation: Optional[str] = None


class ModifyElementCommand(BaseCommand):
    type: Literal["modifyElement"] = "modifyElement"
    payload: ModifyElementPayload
