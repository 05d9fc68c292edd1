"""Console messages."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape


console = Console()


def _padded(message: str) -> None:
    console.print()
    console.print(message)
    console.print()


def print_created(path: Path) -> None:
    """Confirm the creation of the config file."""
    _padded(f"Config file successfully created in: [green]{escape(str(path))}[/green]")


def print_updated() -> None:
    _padded("[green]  Config file successfully updated.[/green]")


def print_removed() -> None:
    _padded("[red]Config file successfully deleted![/red]")


def print_current(label: str, value: str) -> None:
    """Show the current value of a config field."""
    _padded(f"  Current {label}: [bold blue]{escape(value)}[/bold blue]")


def print_no_default_board() -> None:
    console.print()
    console.print("[red]  There is no default board set.[/red]")


def print_default_board(name: str) -> None:
    console.print()
    console.print(f"  Your default board is: [bold green]{escape(name)}[/bold green]")


def print_docs() -> None:
    """Print the usage of the config command."""
    console.print()
    console.print("  Usage:  config <command>")
    console.print()
    console.print()
    console.print("  Commands:")
    console.print()
    console.print("    remove   Remove the config file")
    console.print()


def report_error(message: str) -> None:
    """Report an error to stderr without styling."""
    typer.echo(message, err=True)
