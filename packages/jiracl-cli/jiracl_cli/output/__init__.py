"""Output formatting utilities."""

from jiracl_cli.output.console import (
    print_created,
    print_updated,
    print_removed,
    print_current,
    print_no_default_board,
    print_default_board,
    print_docs,
    report_error,
)
from jiracl_cli.output.log import setup_logging

__all__ = [
    "print_created",
    "print_updated",
    "print_removed",
    "print_current",
    "print_no_default_board",
    "print_default_board",
    "print_docs",
    "report_error",
    "setup_logging",
]
