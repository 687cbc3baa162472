# xsd_editor/errors.py
"""
Exception taxonomy shared by the codec, the command layer and the host pipeline.
Validation rules never raise; they return a ValidationResult instead.
"""

from typing import Optional


class XsdEditorError(Exception):
    pass


class FormatError(XsdEditorError):
    """Malformed node address (e.g. missing leading '/')."""
    pass


class CommandFormatError(FormatError):
    """Raw command data does not decode into any known command shape."""
    pass


class MessageFormatError(FormatError):
    """Raw message data does not decode into any known envelope."""
    pass


class CommandValidationError(XsdEditorError):
    pass


class ExecutionError(XsdEditorError):
    """Raised by an executor when a validated command cannot be applied."""

    def __init__(self, message: str, code: Optional[str] = None, stack: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.stack = stack
