# xsd_editor/cli/commands/catalog.py

import typer

from xsd_editor.cli.commands.output import emit
from xsd_editor.commands import COMMAND_CLASSES


def commands(
    pretty: bool = typer.Option(False, "--pretty", help="Human-readable output (JSON default)"),
):
    """
    Lists every command tag with the wire fields of its payload.
    """
    catalog = {}
    for command_type, command_cls in COMMAND_CLASSES.items():
        payload_cls = command_cls.model_fields["payload"].annotation
        catalog[command_type.value] = {
            name: {"alias": field.alias or name, "required": field.is_required()}
            for name, field in payload_cls.model_fields.items()
        }
    emit(catalog, pretty)
