"""Update command."""

from typing import Optional

import typer

from jiracl_core import (
    BoardService,
    BoardServiceError,
    ConfigField,
    ConfigRecord,
    JiraBoardClient,
    ShowField,
    SetUsername,
    SetHost,
    SetPassword,
    SetDefaultBoard,
    ClearDefaultBoard,
    QueryDefaultBoard,
    UpdateOperation,
    UpdateResult,
    UpdateStatus,
    apply_update,
    parse_proxy_value,
)
from jiracl_cli import prompts
from jiracl_cli.config.settings import get_settings, load_user_config
from jiracl_cli.output.console import (
    print_current,
    print_default_board,
    print_no_default_board,
    print_updated,
    report_error,
)


def get_board_service(record: ConfigRecord) -> BoardService:
    """Create the board service for the configured Jira host."""
    return JiraBoardClient.from_record(record, timeout=get_settings().request_timeout)


def update_command(
    field: ConfigField = typer.Argument(..., help="Field: username, host, password, proxy, board"),
    value: Optional[str] = typer.Argument(None, help="New value (omit to show the current one)"),
    set_board: bool = typer.Option(False, "--set", "-s", help="Choose the default board"),
    remove_board: bool = typer.Option(False, "--remove", "-r", help="Remove the default board"),
) -> None:
    """
    Show or change a single config field.

    Examples:
        jiracl update host                        # Show current host
        jiracl update host example.atlassian.net  # Set host
        jiracl update password                    # Prompt for a new password
        jiracl update proxy remove                # Remove the proxy
        jiracl update board --set                 # Choose the default board
    """
    store = load_user_config()
    board_service = None

    try:
        if field == ConfigField.BOARD:
            board_service = get_board_service(store.record)
            operation = _board_operation(board_service, set_board, remove_board)
        else:
            operation = _field_operation(field, value)

        result = apply_update(store, operation, board_service)
    except BoardServiceError as e:
        report_error(f"Error: {e}")
        raise typer.Exit(1)

    _render(result)


def _field_operation(field: ConfigField, value: Optional[str]) -> UpdateOperation:
    """Build the operation for username, host, password and proxy."""
    match field:
        case ConfigField.PASSWORD:
            answers = prompts.ask([prompts.PASSWORD_QUESTION])
            return SetPassword(answers["password"])
        case _ if value is None:
            return ShowField(field)
        case ConfigField.USERNAME:
            return SetUsername(value)
        case ConfigField.HOST:
            return SetHost(value)
        case ConfigField.PROXY:
            return parse_proxy_value(value)
        case _:
            raise ValueError(f"Unsupported field: {field.value}")


def _board_operation(board_service: BoardService, set_board: bool, remove_board: bool) -> UpdateOperation:
    """Build the board operation; the board list is always fetched first."""
    boards = board_service.list_boards()

    if set_board:
        if not boards:
            raise BoardServiceError("No boards available to choose from")
        answers = prompts.ask([prompts.board_question(boards)])
        return SetDefaultBoard(answers["board"].id)
    if remove_board:
        return ClearDefaultBoard()
    return QueryDefaultBoard()


def _render(result: UpdateResult) -> None:
    match result.status:
        case UpdateStatus.SHOWN:
            value = result.value
            if result.field == ConfigField.PROXY and not value:
                value = "not defined"
            print_current(result.field.value, value)
        case UpdateStatus.SAVED:
            print_updated()
        case UpdateStatus.SAVE_FAILED:
            report_error("Error updating config file.")
        case UpdateStatus.NO_DEFAULT_BOARD:
            print_no_default_board()
        case UpdateStatus.DEFAULT_BOARD:
            print_default_board(result.board.name)
