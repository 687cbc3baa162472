# xsd_editor/cli/app.py

import typer
from xsd_editor.cli.commands.address import address_app
from xsd_editor.cli.commands.validate import validate
from xsd_editor.cli.commands.execute import execute
from xsd_editor.cli.commands.catalog import commands
from xsd_editor.config import load_settings, setup_logging

app = typer.Typer(help="xsd-editor CLI - node addresses and editing commands")

app.add_typer(address_app, name="address")
app.command()(validate)
app.command()(execute)
app.command()(commands)

def main():
    setup_logging(load_settings())
    app()

if __name__ == "__main__":
    main()
