# src/simonsays/core/errors.py
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

err_console = Console(stderr=True, soft_wrap=True, highlight=False)


class SimonSaysError(Exception):
    """Base application exception."""

    pass


class BadRequest(SimonSaysError):
    pass


class NotFound(SimonSaysError):
    pass


class FileOperationError(SimonSaysError):
    """
    A filesystem call failed mid-run. Carries the attempted operation and the
    offending path so the message is useful without a traceback.
    """

    def __init__(
        self,
        operation: str,
        path: Path | str,
        cause: OSError,
        target: Path | str | None = None,
    ) -> None:
        self.operation = operation
        self.path = Path(path)
        self.target = Path(target) if target is not None else None
        self.cause = cause
        where = f"{path} to {target}" if target is not None else f"{path}"
        super().__init__(f"failed to {operation} {where}: {cause}")


def to_exit(exc: Exception) -> typer.Exit:
    """
    Print our exceptions and convert them to a non-zero typer.Exit.
    """
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    return typer.Exit(code=1)
