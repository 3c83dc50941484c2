"""Logging setup: stdlib logging rendered through rich."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


def configure_logging(level: int | str = logging.WARNING, console: Console | None = None) -> RichHandler:
    """Install a RichHandler on the themereport logger.

    Args:
        level: Threshold for themereport records.
        console: Target console. Defaults to stderr.

    Returns:
        The installed handler.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    package_logger = logging.getLogger("themereport")
    for existing in list(package_logger.handlers):
        if isinstance(existing, RichHandler):
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return handler
