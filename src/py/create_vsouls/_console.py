"""Shared rich console and logging setup for the command line."""

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ("configure_logging", "console", "logger")

console = Console(highlight=False)
logger = logging.getLogger("create_vsouls")


def configure_logging(level: "int | str") -> None:
    """Attach a rich handler to the package logger.

    Args:
        level: Logging level name or number.
    """
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False, markup=False))
    logger.setLevel(level)
