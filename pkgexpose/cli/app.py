"""
Main CLI application for pkgexpose.

Defines the Typer application structure and command routing, keeping the
CLI layer thin.
"""
import typer

from pkgexpose.cli.commands.find import find_command
from pkgexpose.cli.commands.show import show_command


# Initialize Typer app
app = typer.Typer(help="pkgexpose - expose properties of the nearest package.json5 / package.json")

# Register commands
app.command("show", help="Show properties of the nearest package manifest.")(show_command)
app.command("find", help="Print the path of the nearest package manifest.")(find_command)
