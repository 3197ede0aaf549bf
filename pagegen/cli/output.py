"""Console output helpers for CLI commands."""

from __future__ import annotations

import sys
import traceback
from typing import Iterable


def print_success(message: str) -> None:
    """
    Print success message with checkmark prefix.

    Examples:
        >>> print_success("Export completed")
        ✓ Export completed
    """
    print(f"✓ {message}")


def print_error(message: str) -> None:
    print(f"✗ {message}", file=sys.stderr)


def print_table(rows: Iterable[tuple]) -> None:
    """Print rows as left-aligned columns."""
    rows = [tuple(str(cell) for cell in row) for row in rows]
    if not rows:
        return
    widths = [max(len(row[index]) for row in rows) for index in range(len(rows[0]))]
    for row in rows:
        cells = [cell.ljust(width) for cell, width in zip(row, widths)]
        print("  ".join(cells).rstrip())


def format_cli_error(exc: BaseException, *, verbose: bool = False) -> str:
    """Message for ``exc``; pagegen errors carry their own code and hint."""
    formatter = getattr(exc, "format", None)
    message = formatter() if callable(formatter) else f"Error: {exc}"
    if verbose:
        trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        message = f"{message}\n{trace.rstrip()}"
    return message


def handle_cli_exception(exc: BaseException, *, verbose: bool = False, exit_code: int = 1) -> None:
    """Print ``exc`` to stderr and exit with ``exit_code``."""
    print_error(format_cli_error(exc, verbose=verbose))
    sys.exit(exit_code)


__all__ = ["format_cli_error", "handle_cli_exception", "print_error", "print_success", "print_table"]
