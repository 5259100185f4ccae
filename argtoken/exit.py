# Argtoken — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Maps parse failures to diagnostics and process exit codes.

This is the only module in argtoken that writes diagnostics or terminates
the process; everything under `argtoken.parser` just raises.

Exit codes:
- 0: no error, or help was requested (`HelpRequested`, or an argument error
  whose message is exactly the help text)
- 22: argument error (EINVAL), the help text is printed before the detail
- custom: any error carrying its own `exit_code`, printed without the help text
- 1: any other exception

Example:
    @catch(HELP)
    def main():
        ...
"""
from __future__ import annotations

import functools
import sys
from typing import Any, Callable, NoReturn, TypeVar

from rich.console import Console
from rich.markup import escape

from argtoken.console import error_console
from argtoken.exceptions import ArgumentError, HelpRequested
from argtoken.logger import logger
from argtoken.themes import OneColors
from argtoken.utils import trim_indentation

T = TypeVar("T")


def _is_help_request(help_text: str, error: BaseException) -> bool:
    return isinstance(error, HelpRequested) or (
        isinstance(error, ArgumentError) and str(error) == help_text
    )


def _print_detail(console: Console, detail: str) -> None:
    console.print(
        f"[{OneColors.DARK_RED}]{escape(detail)}[/]", highlight=False, soft_wrap=True
    )


def exit_code_for(help_text: str, error: BaseException | None = None) -> int:
    """
    Return the process exit code for `error`.

    Args:
        help_text (str): The program's help text.
        error (BaseException | None): The error that ended parsing, if any.

    Returns:
        int: 0 for success or help, the error's `exit_code` otherwise (1 if none).
    """
    if error is None or not str(error):
        return 0
    if _is_help_request(help_text, error):
        return 0
    exit_code = getattr(error, "exit_code", None)
    return 1 if exit_code is None else exit_code


def report(
    help_text: str,
    error: BaseException | None = None,
    console: Console | None = None,
) -> int:
    """
    Write the help text and/or error to the diagnostic stream.

    Help requests, empty errors and errors exiting with 22 print the help
    text. A detail message that differs from the help text follows after a
    blank line. Any other error, including an argument error with a custom
    `exit_code`, prints only its message.

    Returns:
        int: The exit code from `exit_code_for`.
    """
    console = console or error_console
    exit_code = exit_code_for(help_text, error)
    detail = str(error) if error is not None else ""

    if (
        error is None
        or not detail
        or exit_code == ArgumentError.exit_code
        or _is_help_request(help_text, error)
    ):
        console.print(
            trim_indentation(help_text).strip(),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
        if detail and not _is_help_request(help_text, error):  # type: ignore[arg-type]
            console.print()
            _print_detail(console, detail)
    else:
        _print_detail(console, detail)

    logger.debug(
        "Exiting with code %d (%s)",
        exit_code,
        type(error).__name__ if error is not None else "no error",
    )
    return exit_code


def exit_with(help_text: str, error: BaseException | None = None) -> NoReturn:
    """Report `error` and terminate the process with the mapped exit code."""
    sys.exit(report(help_text, error))


def request_help(help_text: str) -> NoReturn:
    """Raise `HelpRequested` so the caller's handler prints help and exits 0."""
    raise HelpRequested(help_text)


def catch(help_text: str) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorate an entry point so any raised `Exception` exits through `exit_with`.

    `SystemExit` and `KeyboardInterrupt` are not intercepted.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as error:
                exit_with(help_text, error)

        return wrapper

    return decorator
