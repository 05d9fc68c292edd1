"""Tests for the prompt engine."""

from jiracl_core import Board
from jiracl_cli import prompts


class FakePrompt:
    calls = []
    answers = {}

    @classmethod
    def ask(cls, message, **kwargs):
        cls.calls.append((message, kwargs))
        return cls.answers[message]


class FakeConfirm:
    calls = []

    @classmethod
    def ask(cls, message, **kwargs):
        cls.calls.append((message, kwargs))
        return kwargs["default"]


def _install(monkeypatch, answers):
    FakePrompt.calls = []
    FakePrompt.answers = answers
    FakeConfirm.calls = []
    monkeypatch.setattr(prompts, "Prompt", FakePrompt)
    monkeypatch.setattr(prompts, "Confirm", FakeConfirm)


def test_connection_questions(monkeypatch):
    """Test the first-run questions, their defaults and secret input."""
    _install(monkeypatch, {
        "Provide your jira host": "a.atlassian.net",
        "Please provide your jira username": "u",
        "Enter your jira API token": "token",
    })

    answers = prompts.ask_connection_details()

    assert answers == {
        "host": "a.atlassian.net",
        "username": "u",
        "password": "token",
        "https_enabled": True,
    }
    host_kwargs = FakePrompt.calls[0][1]
    assert host_kwargs["default"] == "example.atlassian.net"
    assert FakePrompt.calls[1][1]["default"] == "example@domain.com"
    password_kwargs = FakePrompt.calls[2][1]
    assert password_kwargs["password"] is True
    assert "default" not in password_kwargs
    assert [message for message, _ in FakeConfirm.calls] == ["Enable HTTPS Protocol?"]


def test_board_question_returns_board(monkeypatch):
    """Test the chosen label is resolved to its board."""
    boards = [Board(1, "Sprint"), Board(2, "Backlog")]
    _install(monkeypatch, {"Board": "Backlog"})

    answers = prompts.ask([prompts.board_question(boards)])

    assert answers["board"] == Board(2, "Backlog")
    assert FakePrompt.calls[0][1]["choices"] == ["Sprint", "Backlog"]
