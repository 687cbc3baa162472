# xsd_editor/cli/commands/execute.py

import json
from pathlib import Path

import typer

from xsd_editor.cli.commands.output import emit
from xsd_editor.execution import MockSchemaExecutor
from xsd_editor.processor import CommandProcessor


def execute(
    script: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file holding a list of commands"),
    show_tree: bool = typer.Option(False, "--show-tree", help="Print the resulting tree after the responses"),
    pretty: bool = typer.Option(False, "--pretty", help="Human-readable output (JSON default)"),
):
    """
    Replays a list of commands against an empty in-memory schema and prints
    one commandResult per command.
    """
    try:
        raw = json.loads(script.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        typer.echo(f"Invalid JSON in {script}: {e}", err=True)
        raise typer.Exit(code=1)
    if isinstance(raw, dict):
        raw = [raw]
    if not isinstance(raw, list):
        typer.echo(f"{script} must hold a command object or a list of commands", err=True)
        raise typer.Exit(code=1)

    executor = MockSchemaExecutor()
    processor = CommandProcessor(executor)

    responses = [processor.process_raw(item).to_wire() for item in raw]
    output = {"results": responses}
    if show_tree:
        output["tree"] = executor.snapshot()
    emit(output, pretty)
