# Argtoken — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

from argtoken.console import error_console


def trim_indentation(text: str) -> str:
    """
    Remove the leading indentation of the first line from every line.

    Help texts are usually written as indented triple-quoted strings. The
    indentation of the first line (or the second one, when the text starts
    with a newline) is taken as the common prefix.

    Args:
        text (str): The text to dedent.

    Returns:
        str: The text with the indentation removed, or unchanged if the
        reference line is not indented.
    """
    lines = text.split("\n")
    reference = lines[0] or (lines[1] if len(lines) > 1 else "")
    indentation = reference[: len(reference) - len(reference.lstrip())]
    if not indentation:
        return text
    return "\n".join(
        line[len(indentation) :] if line.startswith(indentation) else line
        for line in lines
    )


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Configure logging for argtoken with CLI-friendly or structured JSON output.

    Console output always goes to stderr so it never mixes with parsed results
    printed on stdout.

    Args:
        mode (str | None):
            Logging output mode. Can be:
                - "cli": human-readable Rich console logs (default)
                - "json": machine-readable JSON logs
            If not provided, the `ARGTOKEN_LOG_MODE` environment variable is used.
        log_filename (str | None):
            Optional path to a log file. No file handler is added when omitted.
        json_log_to_file (bool):
            Whether to format file logs as JSON instead of plain text.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("ARGTOKEN_LOG_MODE") or "cli"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            console=error_console,
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(
                    "%(asctime)s %(name)s %(levelname)s %(message)s"
                )
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logger = logging.getLogger("argtoken")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
