"""Config command."""

from enum import Enum
from typing import Optional

import typer

from jiracl_core import ConfigError, remove_config_file
from jiracl_cli.config.settings import load_user_config
from jiracl_cli.output.console import print_docs, print_removed, report_error


class ConfigAction(str, Enum):
    """Actions of the config command."""

    REMOVE = "remove"


def config_command(
    action: Optional[ConfigAction] = typer.Argument(None, help="Action: remove"),
) -> None:
    """
    Manage the config file.

    Examples:
        jiracl config            # Show usage
        jiracl config remove     # Delete the config file
    """
    store = load_user_config()

    if action is None:
        print_docs()
        return

    if action == ConfigAction.REMOVE:
        try:
            remove_config_file(store)
        except ConfigError as e:
            report_error(f"Error: {e}")
            raise typer.Exit(1)

        print_removed()
