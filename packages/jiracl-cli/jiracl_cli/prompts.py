"""Interactive prompts."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from rich.console import Console
from rich.prompt import Confirm, Prompt

from jiracl_core import Board, find_board


class QuestionKind(str, Enum):
    """How a question is asked."""

    TEXT = "text"
    SECRET = "secret"
    CONFIRM = "confirm"
    SINGLE_CHOICE = "single_choice"


@dataclass
class Question:
    """A single prompt and the answer key it fills."""

    kind: QuestionKind
    name: str
    message: str
    default: Any = None
    choices: list[str] = field(default_factory=list)
    filter: Optional[Callable[[Any], Any]] = None


CONNECTION_QUESTIONS = [
    Question(QuestionKind.TEXT, "host", "Provide your jira host", default="example.atlassian.net"),
    Question(QuestionKind.TEXT, "username", "Please provide your jira username", default="example@domain.com"),
    Question(QuestionKind.SECRET, "password", "Enter your jira API token"),
    Question(QuestionKind.CONFIRM, "https_enabled", "Enable HTTPS Protocol?", default=True),
]

PASSWORD_QUESTION = Question(QuestionKind.SECRET, "password", "Type your jira password")


def board_question(boards: list[Board]) -> Question:
    """Single choice over board names; the answer is the chosen Board."""
    return Question(
        QuestionKind.SINGLE_CHOICE,
        "board",
        "Board",
        choices=[board.name for board in boards],
        filter=lambda name: find_board(boards, name),
    )


def ask(questions: list[Question], console: Optional[Console] = None) -> dict[str, Any]:
    """
    Ask each question in order.

    Args:
        questions: Questions to ask
        console: Optional Rich console

    Returns:
        Mapping of question name to (filtered) answer
    """
    answers: dict[str, Any] = {}

    for question in questions:
        match question.kind:
            case QuestionKind.TEXT:
                kwargs = {} if question.default is None else {"default": question.default}
                answer = Prompt.ask(question.message, console=console, **kwargs)
            case QuestionKind.SECRET:
                answer = Prompt.ask(question.message, console=console, password=True)
            case QuestionKind.CONFIRM:
                default = True if question.default is None else question.default
                answer = Confirm.ask(question.message, console=console, default=default)
            case QuestionKind.SINGLE_CHOICE:
                answer = Prompt.ask(question.message, console=console, choices=question.choices)
            case _:
                raise ValueError(f"Unknown question kind: {question.kind}")

        if question.filter:
            answer = question.filter(answer)
        answers[question.name] = answer

    return answers


def ask_connection_details() -> dict[str, Any]:
    """Ask for the connection details of a new config file."""
    return ask(CONNECTION_QUESTIONS)
