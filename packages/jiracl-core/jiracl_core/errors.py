"""Exceptions raised by jiracl core."""

from pathlib import Path
from typing import Optional


class JiraclError(Exception):
    """Base class for all jiracl errors."""


class ConfigError(JiraclError):
    """An operation on the config file failed."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class ConfigFileError(ConfigError):
    """The config file could not be read or is malformed."""


class ConfigWriteError(ConfigError):
    """The config file could not be written."""


class ConfigRemoveError(ConfigError):
    """The config file could not be deleted."""


class BoardServiceError(JiraclError):
    """The remote board service returned an error or could not be reached."""
