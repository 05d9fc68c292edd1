"""jiracl CLI - Main entry point."""

from typing import Optional

import typer

from jiracl_core import ConfigField
from jiracl_cli import __version__
from jiracl_cli.commands import ConfigAction, config_command, update_command
from jiracl_cli.output.log import setup_logging


app = typer.Typer(
    name="jiracl",
    help="jiracl - Jira from the command line",
    add_completion=True,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"jiracl v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version", callback=_version_callback, is_eager=True
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose output"),
):
    """jiracl CLI."""
    setup_logging(verbose)


@app.command()
def config(
    action: Optional[ConfigAction] = typer.Argument(None, help="Action: remove"),
):
    """Manage the config file."""
    config_command(action)


@app.command()
def update(
    field: ConfigField = typer.Argument(..., help="Field: username, host, password, proxy, board"),
    value: Optional[str] = typer.Argument(None, help="New value (omit to show the current one)"),
    set_board: bool = typer.Option(False, "--set", "-s", help="Choose the default board"),
    remove_board: bool = typer.Option(False, "--remove", "-r", help="Remove the default board"),
):
    """Show or change a config field."""
    update_command(field, value, set_board, remove_board)


def main_entry():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main_entry()
