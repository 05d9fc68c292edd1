"""Board entity returned by the remote board service."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Board:
    """A Jira agile board."""

    id: int
    name: str
    type: Optional[str] = None  # scrum, kanban, simple

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Board":
        """Create a Board from a Jira agile API payload."""
        return cls(id=data["id"], name=data["name"], type=data.get("type"))

    def __str__(self) -> str:
        return self.name
