"""Configuration management."""

from jiracl_cli.config.settings import (
    Settings,
    get_settings,
    get_config_path,
    load_user_config,
)

__all__ = [
    "Settings",
    "get_settings",
    "get_config_path",
    "load_user_config",
]
