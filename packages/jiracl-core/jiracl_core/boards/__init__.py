"""Remote board services."""

from jiracl_core.boards.base import BoardService, find_board
from jiracl_core.boards.jira import JiraBoardClient

__all__ = [
    "BoardService",
    "find_board",
    "JiraBoardClient",
]
