"""Logging setup for the command-line interface."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "semver_py"


def configure_logging(level: int = logging.WARNING, console: Console | None = None) -> logging.Logger:
    """Route semver_py log records to stderr through rich.

    Calling this again replaces the previously installed handler.

    Args:
        level: Log level for the semver_py logger
        console: Console to write to (defaults to a stderr console)

    Returns:
        The configured semver_py logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
