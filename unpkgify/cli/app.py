"""
Main CLI application for unpkgify.

Defines the Typer application structure and command routing,
keeping the CLI layer thin.
"""
import typer

from unpkgify.cli.commands.convert import convert_command
from unpkgify.cli.commands.rules import rules_command


# Initialize Typer app
app = typer.Typer(help="unpkgify - turn npm package references into unpkg CDN URLs", no_args_is_help=True)

# Register commands
app.command("convert", help="Convert install commands, imports, requires, npm URLs or bare package names.")(convert_command)
app.command("rules", help="List the active conversion rules in priority order.")(rules_command)
