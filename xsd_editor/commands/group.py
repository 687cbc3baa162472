# xsd_editor/commands/group.py
"""
Group commands: reusable model groups and attribute groups.
"""

from typing import Literal, Optional

from xsd_editor.commands.base import BaseCommand, WireModel


class AddGroupPayload(WireModel):
    group_name: str
    content_model: str
    documentation: Optional[str] = None


class AddGroupCommand(BaseCommand):
    type: Literal["addGroup"] = "addGroup"
    payload: AddGroupPayload


class RemoveGroupPayload(WireModel):
    group_id: str


class RemoveGroupCommand(BaseCommand):
    type: Literal["removeGroup"] = "removeGroup"
    payload: RemoveGroupPayload


class ModifyGroupPayload(WireModel):
    group_id: str
    group_name: Optional[str] = None
    content_model: Optional[str] = None
    documentation: Optional[str] = None


class ModifyGroupCommand(BaseCommand):
    type: Literal["modifyGroup"] = "modifyGroup"
    payload: ModifyGroupPayload


class AddAttributeGroupPayload(WireModel):
    group_name: str
    documentation: Optional[str] = None


class AddAttributeGroupCommand(BaseCommand):
    type: Literal["addAttributeGroup"] = "addAttributeGroup"
    payload: AddAttributeGroupPayload


class RemoveAttributeGroupPayload(WireModel):
    group_id: str


class RemoveAttributeGroupCommand(BaseCommand):
    type: Literal["removeAttributeGroup"] = "removeAttributeGroup"
    payload: RemoveAttributeGroupPayload


class ModifyAttributeGroupPayload(WireModel):
    group_id: str
    group_name: Optional[str] = None
    documentation: Optional[str] = None


class ModifyAttributeGroupCommand(BaseCommand):
    type: Literal["modifyAttributeGroup"] = "modifyAttributeGroup"
    payload: ModifyAttributeGroupPayload
