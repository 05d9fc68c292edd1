"""Data models for jiracl core."""

from jiracl_core.models.config import (
    API_VERSION,
    DEFAULT_CONFIG_FILE_NAME,
    ConfigRecord,
    Protocol,
    record_from_answers,
)
from jiracl_core.models.board import Board
from jiracl_core.models.updates import (
    ConfigField,
    ShowField,
    SetUsername,
    SetHost,
    SetPassword,
    SetProxy,
    SetDefaultBoard,
    ClearDefaultBoard,
    QueryDefaultBoard,
    UpdateOperation,
    parse_proxy_value,
)

__all__ = [
    "API_VERSION",
    "DEFAULT_CONFIG_FILE_NAME",
    "ConfigRecord",
    "Protocol",
    "record_from_answers",
    "Board",
    "ConfigField",
    "ShowField",
    "SetUsername",
    "SetHost",
    "SetPassword",
    "SetProxy",
    "SetDefaultBoard",
    "ClearDefaultBoard",
    "QueryDefaultBoard",
    "UpdateOperation",
    "parse_proxy_value",
]
