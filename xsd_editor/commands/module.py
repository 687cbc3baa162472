# xsd_editor/commands/module.py
"""
Module commands: xs:import and xs:include.
"""

from typing import Literal, Optional

from xsd_editor.commands.base import BaseCommand, WireModel


class AddImportPayload(WireModel):
    namespace: str
    schema_location: str


class AddImportCommand(BaseCommand):
    type: Literal["addImport"] = "addImport"
    payload: AddImportPayload


class RemoveImportPayload(WireModel):
    import_id: str


class RemoveImportCommand(BaseCommand):
    type: Literal["removeImport"] = "removeImport"
    payload: RemoveImportPayload


class ModifyImportPayload(WireModel):
    import_id: str
    namespace: Optional[str] = None
    schema_location: Optional[str] = None


class ModifyImportCommand(BaseCommand):
    type: Literal["modifyImport"] = "modifyImport"
    payload: ModifyImportPayload


class AddIncludePayload(WireModel):
    schema_location: str


class AddIncludeCommand(BaseCommand):
    type: Literal["addInclude"] = "addInclude"
    payload: AddIncludePayload


class RemoveIncludePayload(WireModel):
    include_id: str


class RemoveIncludeCommand(BaseCommand):
    type: Literal["removeInclude"] = "removeInclude"
    payload: RemoveIncludePayload


class ModifyIncludePayload(WireModel):
    include_id: str
    schema_location: Optional[str] = None


class ModifyIncludeCommand(BaseCommand):
    type: Literal["modifyInclude"] = "modifyInclude"
    payload: ModifyIncludePayload
