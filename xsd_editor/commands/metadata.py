# xsd_editor/commands/metadata.py
"""
Metadata commands: annotations and documentation attached to a target node.
"""

from typing import Literal, Optional

from xsd_editor.commands.base import BaseCommand, WireModel


class AddAnnotationPayload(WireModel):
    target_id: str
    documentation: Optional[str] = None
    app_info: Optional[str] = None


class AddAnnotationCommand(BaseCommand):
    type: Literal["addAnnotation"] = "addAnnotation"
    payload: AddAnnotationPayload


class RemoveAnnotationPayload(WireModel):
    annotation_id: str


class RemoveAnnotationCommand(BaseCommand):
    type: Literal["removeAnnotation"] = "removeAnnotation"
    payload: RemoveAnnotationPayload


class ModifyAnnotationPayload(WireModel):
    annotation_id: str
    documentation: Optional[str] = None
    app_info: Optional[str] = None


class ModifyAnnotationCommand(BaseCommand):
    type: Literal["modifyAnnotation"] = "modifyAnnotation"
    payload: ModifyAnnotationPayload


class AddDocumentationPayload(WireModel):
    target_id: str
    content: str
    lang: Optional[str] = None


class AddDocumentationCommand(BaseCommand):
    type: Literal["addDocumentation"] = "addDocumentation"
    payload: AddDocumentationPayload


class RemoveDocumentationPayload(WireModel):
    documentation_id: str


class RemoveDocumentationCommand(BaseCommand):
    type: Literal["removeDocumentation"] = "removeDocumentation"
    payload: RemoveDocumentationPayload


class ModifyDocumentationPayload(WireModel):
    documentation_id: str
    content: Optional[str] = None
    lang: Optional[str] = None


class ModifyDocumentationCommand(BaseCommand):
    type: Literal["modifyDocumentation"] = "modifyDocumentation"
    payload: ModifyDocumentationPayload
