# xsd_editor/messages.py
"""
Message envelopes exchanged between the editor and the host process.

Every message is {command: <tag>, data: <payload>}. The envelope carries no
correlation id: a commandResult answers the most recent executeCommand, so
at most one command may be outstanding at a time.
"""

import traceback
from enum import Enum
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import Field, TypeAdapter, ValidationError

from xsd_editor.commands import CommandResponse, SchemaCommand, WireModel
from xsd_editor.errors import ExecutionError, MessageFormatError


class MessageType(str, Enum):
    EXECUTE_COMMAND = "executeCommand"
    NODE_CLICKED = "nodeClicked"
    UPDATE_SCHEMA = "updateSchema"
    COMMAND_RESULT = "commandResult"
    ERROR = "error"
    SCHEMA_MODIFIED = "schemaModified"
    UPDATE_DIAGRAM_OPTIONS = "updateDiagramOptions"


class ErrorData(WireModel):
    message: str
    code: Optional[str] = None
    stack: Optional[str] = None


class NodeClickedData(WireModel):
    node_address: str


class DiagramOptions(WireModel):
    show_documentation: bool = False
    always_show_occurrence: bool = False
    show_type: bool = False


# Tree snapshots are produced by the host's document parser and are opaque here.
SchemaSnapshot = Dict[str, Any]


class BaseMessage(WireModel):
    command: str
    data: Any = None


# --- Editor -> host ---

class ExecuteCommandMessage(BaseMessage):
    command: Literal["executeCommand"] = "executeCommand"
    data: SchemaCommand


class NodeClickedMessage(BaseMessage):
    command: Literal["nodeClicked"] = "nodeClicked"
    data: NodeClickedData


# --- Host -> editor ---

class UpdateSchemaMessage(BaseMessage):
    command: Literal["updateSchema"] = "updateSchema"
    data: SchemaSnapshot


class SchemaModifiedMessage(BaseMessage):
    command: Literal["schemaModified"] = "schemaModified"
    data: SchemaSnapshot


class CommandResultMessage(BaseMessage):
    command: Literal["commandResult"] = "commandResult"
    data: CommandResponse


class ErrorMessage(BaseMessage):
    command: Literal["error"] = "error"
    data: ErrorData


class UpdateDiagramOptionsMessage(BaseMessage):
    command: Literal["updateDiagramOptions"] = "updateDiagramOptions"
    data: DiagramOptions


OutboundMessage = Annotated[
    Union[ExecuteCommandMessage, NodeClickedMessage],
    Field(discriminator="command"),
]

InboundMessage = Annotated[
    Union[
        UpdateSchemaMessage,
        SchemaModifiedMessage,
        CommandResultMessage,
        ErrorMessage,
        UpdateDiagramOptionsMessage,
    ],
    Field(discriminator="command"),
]

AnyMessage = Annotated[
    Union[
        ExecuteCommandMessage,
        NodeClickedMessage,
        UpdateSchemaMessage,
        SchemaModifiedMessage,
        CommandResultMessage,
        ErrorMessage,
        UpdateDiagramOptionsMessage,
    ],
    Field(discriminator="command"),
]

_outbound_adapter: TypeAdapter = TypeAdapter(OutboundMessage)
_inbound_adapter: TypeAdapter = TypeAdapter(InboundMessage)
_any_adapter: TypeAdapter = TypeAdapter(AnyMessage)


def _decode(adapter: TypeAdapter, raw: Union[str, bytes, Dict[str, Any]]):
    try:
        if isinstance(raw, (str, bytes)):
            return adapter.validate_json(raw)
        return adapter.validate_python(raw)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise MessageFormatError(f"Invalid message: {location}: {first.get('msg')}") from e


def parse_outbound_message(raw: Union[str, bytes, Dict[str, Any]]):
    return _decode(_outbound_adapter, raw)


def parse_inbound_message(raw: Union[str, bytes, Dict[str, Any]]):
    return _decode(_inbound_adapter, raw)


def parse_message(raw: Union[str, bytes, Dict[str, Any]]):
    return _decode(_any_adapter, raw)


# --- Builders ---

def execute_command_message(command) -> ExecuteCommandMessage:
    return ExecuteCommandMessage(data=command)


def command_result_message(response: CommandResponse) -> CommandResultMessage:
    return CommandResultMessage(data=response)


def error_message_from(exc: BaseException, include_stack: bool = False) -> ErrorMessage:
    """Wraps an exception for the editor; ExecutionError keeps its code and stack."""
    if isinstance(exc, ExecutionError):
        data = ErrorData(message=exc.message, code=exc.code, stack=exc.stack)
    else:
        data = ErrorData(message=str(exc) or type(exc).__name__)
    if include_stack and data.stack is None:
        data.stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return ErrorMessage(data=data)
