# xsd_editor/processor.py
"""
CommandProcessor: the host-side pipeline for editing commands.

validate -> execute -> CommandResponse. The executor owns the document tree;
this module only decides whether a command may reach it and shapes the
answer that goes back to the editor.
"""

import logging
from typing import Any, Dict, Optional, Protocol

from xsd_editor.commands import AnyCommand, CommandResponse, parse_command
from xsd_editor.errors import CommandValidationError, ExecutionError, FormatError
from xsd_editor.messages import (
    CommandResultMessage,
    ExecuteCommandMessage,
    command_result_message,
)
from xsd_editor.validation import CommandValidator

logger = logging.getLogger(__name__)


class SchemaExecutor(Protocol):
    def execute(self, command: AnyCommand) -> Optional[Dict[str, Any]]:
        """Applies a validated command; raises ExecutionError on failure."""
        ...


class CommandProcessor:
    def __init__(self, executor: SchemaExecutor, validator: Optional[CommandValidator] = None):
        self.executor = executor
        self.validator = validator or CommandValidator()

    def process(self, command: AnyCommand) -> CommandResponse:
        """
        Validates and executes a single command.
        Never raises for a bad command: every failure becomes success=False.
        """
        validation = self.validator.validate(command)
        if not validation.valid:
            return CommandResponse.fail(validation.error)

        try:
            data = self.executor.execute(command)
        except ExecutionError as e:
            logger.warning(f"Command {command.type} failed: {e.message}")
            return CommandResponse.fail(e.message)
        except FormatError as e:
            return CommandResponse.fail(str(e))
        except Exception as e:
            # Any failure reaches the editor as a failed response.
            logger.exception(f"Unexpected error while executing {command.type}")
            return CommandResponse.fail(f"Command execution failed: {e}")

        logger.info(f"Command {command.type} executed")
        return CommandResponse.ok(data)

    def process_raw(self, raw) -> CommandResponse:
        """Decodes a wire command first; undecodable input is reported as a failure."""
        try:
            command = parse_command(raw)
        except FormatError as e:
            return CommandResponse.fail(str(e))
        return self.process(command)

    def handle_message(self, message: ExecuteCommandMessage) -> CommandResultMessage:
        return command_result_message(self.process(message.data))

    def require_valid(self, command: AnyCommand) -> None:
        """Raising variant of validation for callers that prefer exceptions."""
        validation = self.validator.validate(command)
        if not validation.valid:
            raise CommandValidationError(validation.error)
