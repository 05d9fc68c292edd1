"""
jiracl Core

Configuration store of the jiracl command line client.
No CLI, no prompts - just the config lifecycle and the board lookups it needs.
"""

from jiracl_core.models.config import ConfigRecord, Protocol, API_VERSION, DEFAULT_CONFIG_FILE_NAME
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
from jiracl_core.store import (
    ConfigStore,
    Created,
    Loaded,
    InitResult,
    initialize,
    load_config_file,
    write_config_file,
    create_config_file,
    persist,
    remove_config_file,
)
from jiracl_core.manager import UpdateResult, UpdateStatus, apply_update
from jiracl_core.boards.base import BoardService, find_board
from jiracl_core.boards.jira import JiraBoardClient
from jiracl_core.errors import (
    JiraclError,
    ConfigError,
    ConfigFileError,
    ConfigWriteError,
    ConfigRemoveError,
    BoardServiceError,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "ConfigRecord",
    "Protocol",
    "API_VERSION",
    "DEFAULT_CONFIG_FILE_NAME",
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
    # Store
    "ConfigStore",
    "Created",
    "Loaded",
    "InitResult",
    "initialize",
    "load_config_file",
    "write_config_file",
    "create_config_file",
    "persist",
    "remove_config_file",
    # Updates
    "UpdateResult",
    "UpdateStatus",
    "apply_update",
    # Boards
    "BoardService",
    "find_board",
    "JiraBoardClient",
    # Errors
    "JiraclError",
    "ConfigError",
    "ConfigFileError",
    "ConfigWriteError",
    "ConfigRemoveError",
    "BoardServiceError",
]
