# xsd_editor/cli/commands/address.py

from typing import Optional

import typer

from xsd_editor.addressing import IdGenerationParams, NodeKind, generate_address, parse_address
from xsd_editor.cli.commands.output import emit
from xsd_editor.errors import FormatError

address_app = typer.Typer(help="Generate and parse node addresses")


@address_app.command("generate")
def generate(
    kind: NodeKind = typer.Option(..., "--kind", help="Node kind, e.g. element or complexType"),
    name: Optional[str] = typer.Option(None, "--name", help="Local name of the node"),
    parent: Optional[str] = typer.Option(None, "--parent", help="Address of the parent node"),
    position: Optional[int] = typer.Option(None, "--position", min=0, help="Index among same-kind siblings"),
    namespace: Optional[str] = typer.Option(None, "--namespace", help="Namespace URI of the name"),
    pretty: bool = typer.Option(False, "--pretty", help="Human-readable output (JSON default)"),
):
    """
    Prints the address for a node described by its structural facts.
    """
    params = IdGenerationParams(kind=kind, name=name, parent_id=parent, position=position, namespace=namespace)
    emit({"address": generate_address(params)}, pretty)


@address_app.command("parse")
def parse(
    address: str,
    pretty: bool = typer.Option(False, "--pretty", help="Human-readable output (JSON default)"),
):
    """
    Splits an address into kind, name, namespace, position and parent.
    """
    try:
        parsed = parse_address(address)
    except FormatError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    emit(parsed.model_dump(mode="json"), pretty)
