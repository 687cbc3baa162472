# xsd_editor/cli/commands/validate.py

from pathlib import Path

import typer

from xsd_editor.cli.commands.output import emit
from xsd_editor.commands import parse_command
from xsd_editor.errors import FormatError
from xsd_editor.validation import CommandValidator

validator = CommandValidator()


def validate(
    command_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file holding one command"),
    pretty: bool = typer.Option(False, "--pretty", help="Human-readable output (JSON default)"),
):
    """
    Checks a command against the validation rules without executing it.
    Exits with status 1 when the command is rejected.
    """
    try:
        command = parse_command(command_file.read_text(encoding="utf-8"))
    except FormatError as e:
        emit({"valid": False, "error": str(e)}, pretty)
        raise typer.Exit(code=1)

    result = validator.validate(command)
    emit(result.model_dump(exclude_none=True), pretty)
    if not result.valid:
        raise typer.Exit(code=1)
