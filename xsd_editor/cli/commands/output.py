# xsd_editor/cli/commands/output.py

import json
from typing import Any

import typer


def emit(output: Any, pretty: bool) -> None:
    """JSON for machines by default, indented JSON with --pretty."""
    if pretty:
        typer.echo(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        typer.echo(json.dumps(output, ensure_ascii=False))
