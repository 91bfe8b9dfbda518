"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import typer

from relphase.core.errors import ErrorCode
from relphase.core.result import Err, Result
from relphase.output.console import Style

if TYPE_CHECKING:
    from relphase.output.console import ConsoleProtocol


T = TypeVar("T")
E = TypeVar("E")


def exit_on_error(
    result: Result[T, E],
    console: ConsoleProtocol,
    error_code: ErrorCode = ErrorCode.ENV_ERROR,
) -> T:
    """Return the Ok value, or print the error and exit.

    Expects error objects to have 'message' and optional 'hint' attributes.
    """
    if isinstance(result, Err):
        error = result.error
        message: str = getattr(error, "message", str(error))
        hint: str | None = getattr(error, "hint", None)
        console.error(message)
        if hint:
            console.print(f"hint: {hint}", Style.DIM)
        raise typer.Exit(code=int(error_code))
    return result.value


def yes_no(value: bool) -> str:
    return "yes" if value else "no"
