# xsd_editor/__init__.py
"""
Addressing and command layer for a visual XML Schema editor.

The editor and the host process that owns the schema document share:
- node addresses (xsd_editor.addressing)
- a closed set of editing commands (xsd_editor.commands)
- the validation rules a command must pass (xsd_editor.validation)
- the message envelopes that carry them (xsd_editor.messages)
"""

from xsd_editor.addressing import (
    IdGenerationParams,
    NodeKind,
    ParsedAddress,
    generate_address,
    is_top_level,
    node_kind,
    node_name,
    parent_address,
    parse_address,
)
from xsd_editor.commands import CommandResponse, CommandType, parse_command
from xsd_editor.errors import (
    CommandFormatError,
    CommandValidationError,
    ExecutionError,
    FormatError,
    MessageFormatError,
    XsdEditorError,
)
from xsd_editor.validation import CommandValidator, ValidationResult

__version__ = "0.1.0"
