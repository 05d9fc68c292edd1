"""CLI commands."""

from jiracl_cli.commands.config import ConfigAction, config_command
from jiracl_cli.commands.update import update_command

__all__ = [
    "ConfigAction",
    "config_command",
    "update_command",
]
