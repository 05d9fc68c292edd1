"""Update operations that can be applied to a config record."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from jiracl_core.models.config import BoardId


PROXY_REMOVE_SENTINEL = "remove"


class ConfigField(str, Enum):
    """Fields exposed by the update command."""

    USERNAME = "username"
    HOST = "host"
    PASSWORD = "password"
    PROXY = "proxy"
    BOARD = "board"


@dataclass(frozen=True)
class ShowField:
    """Display the current value of username, host or proxy."""

    field: ConfigField

    def __post_init__(self):
        if self.field not in (ConfigField.USERNAME, ConfigField.HOST, ConfigField.PROXY):
            raise ValueError(f"Field '{self.field.value}' cannot be shown")


@dataclass(frozen=True)
class SetUsername:
    value: str


@dataclass(frozen=True)
class SetHost:
    value: str


@dataclass(frozen=True)
class SetPassword:
    value: str


@dataclass(frozen=True)
class SetProxy:
    """Set the proxy URL. None removes it."""

    value: Optional[str]


@dataclass(frozen=True)
class SetDefaultBoard:
    board_id: BoardId


@dataclass(frozen=True)
class ClearDefaultBoard:
    pass


@dataclass(frozen=True)
class QueryDefaultBoard:
    pass


UpdateOperation = Union[
    ShowField,
    SetUsername,
    SetHost,
    SetPassword,
    SetProxy,
    SetDefaultBoard,
    ClearDefaultBoard,
    QueryDefaultBoard,
]


def parse_proxy_value(value: str) -> SetProxy:
    """Turn a command-line proxy value into an operation; "remove" clears the proxy."""
    if value == PROXY_REMOVE_SENTINEL:
        return SetProxy(None)
    return SetProxy(value)
