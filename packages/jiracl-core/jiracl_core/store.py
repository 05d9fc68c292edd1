"""Config file lifecycle: create, load, persist and remove."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Union

from jiracl_core.errors import ConfigFileError, ConfigRemoveError, ConfigWriteError
from jiracl_core.models.config import ConfigRecord, record_from_answers


logger = logging.getLogger(__name__)


@dataclass
class ConfigStore:
    """The config file path and the record currently loaded from it."""

    file_path: Path
    record: ConfigRecord


@dataclass
class Created:
    """The config file did not exist and was created from prompt answers."""

    store: ConfigStore


@dataclass
class Loaded:
    """The config file existed and was loaded."""

    store: ConfigStore


InitResult = Union[Created, Loaded]


def initialize(file_path: Path, collect_answers: Callable[[], dict[str, Any]]) -> InitResult:
    """
    Create or load the config file.

    The caller decides what to do with a freshly created config; the CLI
    stops there so the first run never executes the requested command.

    Args:
        file_path: Absolute path of the config file
        collect_answers: Called only on first run to gather connection details

    Returns:
        Created or Loaded, both carrying the ConfigStore

    Raises:
        ConfigFileError: if an existing file cannot be parsed
        ConfigWriteError: if a new file cannot be written
    """
    if not file_path.exists():
        logger.debug("No config file at %s, starting interactive creation", file_path)
        record = create_config_file(file_path, collect_answers())
        return Created(ConfigStore(file_path=file_path, record=record))

    return Loaded(ConfigStore(file_path=file_path, record=load_config_file(file_path)))


def load_config_file(file_path: Path) -> ConfigRecord:
    """Read and parse the config file."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileError(f"Could not read config file: {e}", file_path) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigFileError(f"Config file is not valid JSON: {e}", file_path) from e

    if not isinstance(data, dict):
        raise ConfigFileError("Config file must contain a JSON object", file_path)

    try:
        record = ConfigRecord.from_dict(data)
    except ConfigFileError as e:
        e.path = file_path
        raise

    logger.debug("Loaded config from %s", file_path)
    return record


def write_config_file(file_path: Path, record: ConfigRecord) -> None:
    """
    Serialize a record to the config file, replacing its content.

    Raises:
        ConfigWriteError: if the file cannot be written
    """
    try:
        file_path.write_text(json.dumps(record.to_dict(), indent=2), encoding="utf-8")
    except OSError as e:
        raise ConfigWriteError(f"Could not write config file: {e}", file_path) from e

    logger.debug("Wrote config to %s", file_path)


def create_config_file(file_path: Path, answers: dict[str, Any]) -> ConfigRecord:
    """Build a record from the first-run answers and write it."""
    record = record_from_answers(answers)
    write_config_file(file_path, record)
    return record


def persist(store: ConfigStore, record: ConfigRecord) -> None:
    """
    Write a new record, then make it the store's current record.

    On failure the store keeps the last record that was written, so memory
    and disk never disagree.

    Raises:
        ConfigWriteError: if the file cannot be written
    """
    write_config_file(store.file_path, record)
    store.record = record


def remove_config_file(store: ConfigStore) -> None:
    """
    Delete the config file.

    Raises:
        ConfigRemoveError: if the file is missing or cannot be deleted
    """
    try:
        store.file_path.unlink()
    except OSError as e:
        raise ConfigRemoveError(f"Could not delete config file: {e}", store.file_path) from e

    logger.debug("Removed config file %s", store.file_path)
