"""Base board service."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from jiracl_core.models.board import Board
from jiracl_core.models.config import BoardId


class BoardService(ABC):
    """
    Abstract source of Jira boards.

    The config manager only needs to list boards and resolve one by id.
    """

    @abstractmethod
    def list_boards(self) -> list[Board]:
        """List the boards visible to the configured user."""
        pass

    @abstractmethod
    def get_board(self, board_id: BoardId) -> Board:
        """Get a single board by id."""
        pass


def find_board(boards: Iterable[Board], name: str) -> Optional[Board]:
    """Return the first board with the given name, or None."""
    return next((board for board in boards if board.name == name), None)
