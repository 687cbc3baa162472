# xsd_editor/commands/__init__.py
"""
Command Layer Definitions

Commands are the sole entry point for mutating the schema document. Visual
actions in the editor are translated into these explicit, verifiable
commands, addressed by node addresses (see xsd_editor.addressing).
"""

from enum import Enum
from typing import Annotated, Any, Dict, Type, Union

from pydantic import Field, TypeAdapter, ValidationError

from xsd_editor.errors import CommandFormatError
from xsd_editor.commands.base import (
    BaseCommand,
    CommandResponse,
    ContentModel,
    VALID_CONTENT_MODELS,
    WireModel,
)
from xsd_editor.commands.element import (
    AddElementCommand, AddElementPayload,
    RemoveElementCommand, RemoveElementPayload,
    ModifyElementCommand, ModifyElementPayload,
)
from xsd_editor.commands.attribute import (
    AddAttributeCommand, AddAttributePayload,
    RemoveAttributeCommand, RemoveAttributePayload,
    ModifyAttributeCommand, ModifyAttributePayload,
)
from xsd_editor.commands.schema_types import (
    RestrictionFacets,
    AddSimpleTypeCommand, AddSimpleTypePayload,
    RemoveSimpleTypeCommand, RemoveSimpleTypePayload,
    ModifySimpleTypeCommand, ModifySimpleTypePayload,
    AddComplexTypeCommand, AddComplexTypePayload,
    RemoveComplexTypeCommand, RemoveComplexTypePayload,
    ModifyComplexTypeCommand, ModifyComplexTypePayload,
)
from xsd_editor.commands.group import (
    AddGroupCommand, AddGroupPayload,
    RemoveGroupCommand, RemoveGroupPayload,
    ModifyGroupCommand, ModifyGroupPayload,
    AddAttributeGroupCommand, AddAttributeGroupPayload,
    RemoveAttributeGroupCommand, RemoveAttributeGroupPayload,
    ModifyAttributeGroupCommand, ModifyAttributeGroupPayload,
)
from xsd_editor.commands.metadata import (
    AddAnnotationCommand, AddAnnotationPayload,
    RemoveAnnotationCommand, RemoveAnnotationPayload,
    ModifyAnnotationCommand, ModifyAnnotationPayload,
    AddDocumentationCommand, AddDocumentationPayload,
    RemoveDocumentationCommand, RemoveDocumentationPayload,
    ModifyDocumentationCommand, ModifyDocumentationPayload,
)
from xsd_editor.commands.module import (
    AddImportCommand, AddImportPayload,
    RemoveImportCommand, RemoveImportPayload,
    ModifyImportCommand, ModifyImportPayload,
    AddIncludeCommand, AddIncludePayload,
    RemoveIncludeCommand, RemoveIncludePayload,
    ModifyIncludeCommand, ModifyIncludePayload,
)


class CommandType(str, Enum):
    ADD_ELEMENT = "addElement"
    REMOVE_ELEMENT = "removeElement"
    MODIFY_ELEMENT = "modifyElement"
    ADD_ATTRIBUTE = "addAttribute"
    REMOVE_ATTRIBUTE = "removeAttribute"
    MODIFY_ATTRIBUTE = "modifyAttribute"
    ADD_SIMPLE_TYPE = "addSimpleType"
    REMOVE_SIMPLE_TYPE = "removeSimpleType"
    MODIFY_SIMPLE_TYPE = "modifySimpleType"
    ADD_COMPLEX_TYPE = "addComplexType"
    REMOVE_COMPLEX_TYPE = "removeComplexType"
    MODIFY_COMPLEX_TYPE = "modifyComplexType"
    ADD_GROUP = "addGroup"
    REMOVE_GROUP = "removeGroup"
    MODIFY_GROUP = "modifyGroup"
    ADD_ATTRIBUTE_GROUP = "addAttributeGroup"
    REMOVE_ATTRIBUTE_GROUP = "removeAttributeGroup"
    MODIFY_ATTRIBUTE_GROUP = "modifyAttributeGroup"
    ADD_ANNOTATION = "addAnnotation"
    REMOVE_ANNOTATION = "removeAnnotation"
    MODIFY_ANNOTATION = "modifyAnnotation"
    ADD_DOCUMENTATION = "addDocumentation"
    REMOVE_DOCUMENTATION = "removeDocumentation"
    MODIFY_DOCUMENTATION = "modifyDocumentation"
    ADD_IMPORT = "addImport"
    REMOVE_IMPORT = "removeImport"
    MODIFY_IMPORT = "modifyImport"
    ADD_INCLUDE = "addInclude"
    REMOVE_INCLUDE = "removeInclude"
    MODIFY_INCLUDE = "modifyInclude"


# Map command tags to their Python classes.
COMMAND_CLASSES: Dict[CommandType, Type[BaseCommand]] = {
    CommandType.ADD_ELEMENT: AddElementCommand,
    CommandType.REMOVE_ELEMENT: RemoveElementCommand,
    CommandType.MODIFY_ELEMENT: ModifyElementCommand,
    CommandType.ADD_ATTRIBUTE: AddAttributeCommand,
    CommandType.REMOVE_ATTRIBUTE: RemoveAttributeCommand,
    CommandType.MODIFY_ATTRIBUTE: ModifyAttributeCommand,
    CommandType.ADD_SIMPLE_TYPE: AddSimpleTypeCommand,
    CommandType.REMOVE_SIMPLE_TYPE: RemoveSimpleTypeCommand,
    CommandType.MODIFY_SIMPLE_TYPE: ModifySimpleTypeCommand,
    CommandType.ADD_COMPLEX_TYPE: AddComplexTypeCommand,
    CommandType.REMOVE_COMPLEX_TYPE: RemoveComplexTypeCommand,
    CommandType.MODIFY_COMPLEX_TYPE: ModifyComplexTypeCommand,
    CommandType.ADD_GROUP: AddGroupCommand,
    CommandType.REMOVE_GROUP: RemoveGroupCommand,
    CommandType.MODIFY_GROUP: ModifyGroupCommand,
    CommandType.ADD_ATTRIBUTE_GROUP: AddAttributeGroupCommand,
    CommandType.REMOVE_ATTRIBUTE_GROUP: RemoveAttributeGroupCommand,
    CommandType.MODIFY_ATTRIBUTE_GROUP: ModifyAttributeGroupCommand,
    CommandType.ADD_ANNOTATION: AddAnnotationCommand,
    CommandType.REMOVE_ANNOTATION: RemoveAnnotationCommand,
    CommandType.MODIFY_ANNOTATION: ModifyAnnotationCommand,
    CommandType.ADD_DOCUMENTATION: AddDocumentationCommand,
    CommandType.REMOVE_DOCUMENTATION: RemoveDocumentationCommand,
    CommandType.MODIFY_DOCUMENTATION: ModifyDocumentationCommand,
    CommandType.ADD_IMPORT: AddImportCommand,
    CommandType.REMOVE_IMPORT: RemoveImportCommand,
    CommandType.MODIFY_IMPORT: ModifyImportCommand,
    CommandType.ADD_INCLUDE: AddIncludeCommand,
    CommandType.REMOVE_INCLUDE: RemoveIncludeCommand,
    CommandType.MODIFY_INCLUDE: ModifyIncludeCommand,
}

_missing = set(CommandType) - set(COMMAND_CLASSES)
if _missing:
    raise RuntimeError(f"Command classes missing for: {sorted(t.value for t in _missing)}")


# A union type for easier handling in the command executor
AnyCommand = Union[
    AddElementCommand, RemoveElementCommand, ModifyElementCommand,
    AddAttributeCommand, RemoveAttributeCommand, ModifyAttributeCommand,
    AddSimpleTypeCommand, RemoveSimpleTypeCommand, ModifySimpleTypeCommand,
    AddComplexTypeCommand, RemoveComplexTypeCommand, ModifyComplexTypeCommand,
    AddGroupCommand, RemoveGroupCommand, ModifyGroupCommand,
    AddAttributeGroupCommand, RemoveAttributeGroupCommand, ModifyAttributeGroupCommand,
    AddAnnotationCommand, RemoveAnnotationCommand, ModifyAnnotationCommand,
    AddDocumentationCommand, RemoveDocumentationCommand, ModifyDocumentationCommand,
    AddImportCommand, RemoveImportCommand, ModifyImportCommand,
    AddIncludeCommand, RemoveIncludeCommand, ModifyIncludeCommand,
]

SchemaCommand = Annotated[AnyCommand, Field(discriminator="type")]

_command_adapter: TypeAdapter = TypeAdapter(SchemaCommand)


def command_type_of(command: BaseCommand) -> CommandType:
    return CommandType(command.type)


def parse_command(raw: Union[str, bytes, Dict[str, Any]]) -> AnyCommand:
    """Decodes a wire command (dict or JSON text) into its typed command."""
    try:
        if isinstance(raw, (str, bytes)):
            return _command_adapter.validate_json(raw)
        return _command_adapter.validate_python(raw)
    except ValidationError as e:
        raise CommandFormatError(f"Invalid command: {_summarize(e)}") from e


def _summarize(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


__all__ = [
    "AnyCommand", "BaseCommand", "COMMAND_CLASSES", "CommandResponse", "CommandType",
    "ContentModel", "RestrictionFacets", "SchemaCommand", "VALID_CONTENT_MODELS",
    "WireModel", "command_type_of", "parse_command",
    "AddElementCommand", "AddElementPayload", "RemoveElementCommand", "RemoveElementPayload",
    "ModifyElementCommand", "ModifyElementPayload",
    "AddAttributeCommand", "AddAttributePayload", "RemoveAttributeCommand",
    "RemoveAttributePayload", "ModifyAttributeCommand", "ModifyAttributePayload",
    "AddSimpleTypeCommand", "AddSimpleTypePayload", "RemoveSimpleTypeCommand",
    "RemoveSimpleTypePayload", "ModifySimpleTypeCommand", "ModifySimpleTypePayload",
    "AddComplexTypeCommand", "AddComplexTypePayload", "RemoveComplexTypeCommand",
    "RemoveComplexTypePayload", "ModifyComplexTypeCommand", "ModifyComplexTypePayload",
    "AddGroupCommand", "AddGroupPayload", "RemoveGroupCommand", "RemoveGroupPayload",
    "ModifyGroupCommand", "ModifyGroupPayload",
    "AddAttributeGroupCommand", "AddAttributeGroupPayload", "RemoveAttributeGroupCommand",
    "RemoveAttributeGroupPayload", "ModifyAttributeGroupCommand", "ModifyAttributeGroupPayload",
    "AddAnnotationCommand", "AddAnnotationPayload", "RemoveAnnotationCommand",
    "RemoveAnnotationPayload", "ModifyAnnotationCommand", "ModifyAnnotationPayload",
    "AddDocumentationCommand", "AddDocumentationPayload", "RemoveDocumentationCommand",
    "RemoveDocumentationPayload", "ModifyDocumentationCommand", "ModifyDocumentationPayload",
    "AddImportCommand", "AddImportPayload", "RemoveImportCommand", "RemoveImportPayload",
    "ModifyImportCommand", "ModifyImportPayload",
    "AddIncludeCommand", "AddIncludePayload", "RemoveIncludeCommand", "RemoveIncludePayload",
    "ModifyIncludeCommand", "ModifyIncludePayload",
]
