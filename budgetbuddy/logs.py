"""Diagnostic logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "budgetbuddy"


def setup_logging(level: str = "WARNING") -> None:
    """Send budgetbuddy log records to stderr through rich.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Raises:
        ValueError: If the level name is unknown.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level!r}")

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
