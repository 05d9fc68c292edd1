"""User settings management."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

import typer
from pydantic_settings import BaseSettings, SettingsConfigDict

from jiracl_core import ConfigError, ConfigStore, Created, Loaded, initialize
from jiracl_core.models.config import DEFAULT_CONFIG_FILE_NAME
from jiracl_cli.output.console import print_created, report_error
from jiracl_cli.prompts import ask_connection_details


class Settings(BaseSettings):
    """Process settings, overridable through JIRACL_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="JIRACL_", env_file=".env", extra="ignore")

    config_file_name: str = DEFAULT_CONFIG_FILE_NAME
    home_dir: Optional[Path] = None  # None = the user's home directory

    # Remote board lookups
    request_timeout: float = 30.0


@lru_cache
def get_settings() -> Settings:
    """Get the process settings, resolved once."""
    return Settings()


def get_config_path() -> Path:
    """Get user config file path."""
    settings = get_settings()
    home_dir = settings.home_dir or Path.home()
    return home_dir / settings.config_file_name


def load_user_config() -> ConfigStore:
    """
    Load the user configuration, creating it on first run.

    A freshly created config ends the process: the user runs the
    command again once the connection details are saved.

    Returns:
        ConfigStore of the existing config file
    """
    config_path = get_config_path()

    try:
        result = initialize(config_path, ask_connection_details)
    except ConfigError as e:
        report_error(f"Error: {e}")
        raise typer.Exit(1)

    match result:
        case Created(store=store):
            print_created(store.file_path)
            raise typer.Exit(0)
        case Loaded(store=store):
            return store
