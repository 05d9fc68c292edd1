"""Shared fixtures for jiracl-core tests."""

import pytest

from jiracl_core import Board, BoardService, ConfigRecord, ConfigStore, Protocol, write_config_file


class FakeBoardService(BoardService):
    """In-memory board service that counts calls."""

    def __init__(self, boards):
        self.boards = boards
        self.list_calls = 0
        self.get_calls = []

    def list_boards(self):
        self.list_calls += 1
        return list(self.boards)

    def get_board(self, board_id):
        self.get_calls.append(board_id)
        return next(b for b in self.boards if b.id == board_id)


@pytest.fixture
def record():
    return ConfigRecord(
        protocol=Protocol.HTTPS,
        host="a.atlassian.net",
        username="u",
        password="p",
    )


@pytest.fixture
def store(tmp_path, record):
    path = tmp_path / ".jira-cl.json"
    write_config_file(path, record)
    return ConfigStore(file_path=path, record=record)


@pytest.fixture
def boards():
    return [Board(id=1, name="Sprint"), Board(id=2, name="Backlog")]


@pytest.fixture
def board_service(boards):
    return FakeBoardService(boards)
