"""Apply update operations to a config store."""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional

from jiracl_core.boards.base import BoardService
from jiracl_core.errors import ConfigWriteError
from jiracl_core.models.board import Board
from jiracl_core.models.config import ConfigRecord
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
)
from jiracl_core.store import ConfigStore, persist


logger = logging.getLogger(__name__)


class UpdateStatus(str, Enum):
    """Outcome of an update operation."""

    SHOWN = "shown"
    SAVED = "saved"
    SAVE_FAILED = "save_failed"
    NO_DEFAULT_BOARD = "no_default_board"
    DEFAULT_BOARD = "default_board"


@dataclass
class UpdateResult:
    """Result of apply_update, rendered by the caller."""

    status: UpdateStatus
    field: Optional[ConfigField] = None
    value: Any = None
    board: Optional[Board] = None
    error: Optional[str] = None

    @property
    def saved(self) -> bool:
        """Check if the change reached the config file."""
        return self.status == UpdateStatus.SAVED


def apply_update(
    store: ConfigStore,
    operation: UpdateOperation,
    board_service: Optional[BoardService] = None,
) -> UpdateResult:
    """
    Apply one update operation to the store.

    Args:
        store: Loaded config store
        operation: The operation to apply
        board_service: Needed only for QueryDefaultBoard

    Returns:
        UpdateResult describing what happened

    Raises:
        BoardServiceError: if the board lookup fails
    """
    record = store.record

    match operation:
        case ShowField(field=field):
            return UpdateResult(UpdateStatus.SHOWN, field=field, value=getattr(record, field.value))
        case SetUsername(value=value):
            return _save(store, replace(record, username=value), ConfigField.USERNAME)
        case SetHost(value=value):
            return _save(store, replace(record, host=value), ConfigField.HOST)
        case SetPassword(value=value):
            return _save(store, replace(record, password=value), ConfigField.PASSWORD)
        case SetProxy(value=value):
            return _save(store, replace(record, proxy=value), ConfigField.PROXY)
        case SetDefaultBoard(board_id=board_id):
            return _save(store, replace(record, default_board=board_id), ConfigField.BOARD)
        case ClearDefaultBoard():
            if not record.has_default_board:
                return UpdateResult(UpdateStatus.NO_DEFAULT_BOARD, field=ConfigField.BOARD)
            return _save(store, replace(record, default_board=None), ConfigField.BOARD)
        case QueryDefaultBoard():
            if not record.has_default_board:
                return UpdateResult(UpdateStatus.NO_DEFAULT_BOARD, field=ConfigField.BOARD)
            if board_service is None:
                raise ValueError("A board service is required to look up the default board")
            board = board_service.get_board(record.default_board)
            return UpdateResult(
                UpdateStatus.DEFAULT_BOARD,
                field=ConfigField.BOARD,
                value=board.id,
                board=board,
            )
        case _:
            raise TypeError(f"Unsupported update operation: {operation!r}")


def _save(store: ConfigStore, record: ConfigRecord, field: ConfigField) -> UpdateResult:
    """Persist a changed record, turning a write failure into a result."""
    try:
        persist(store, record)
    except ConfigWriteError as e:
        logger.debug("Updating %s failed: %s", field.value, e)
        return UpdateResult(UpdateStatus.SAVE_FAILED, field=field, error=str(e))

    logger.debug("Updated %s", field.value)
    return UpdateResult(UpdateStatus.SAVED, field=field)
