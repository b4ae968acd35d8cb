"""Logging setup for the command line.

Log records go to stderr through rich so that --json output on stdout stays
a single clean document.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "claw_deps"


def setup_logging(level: str = "WARNING", verbose: bool = False) -> logging.Logger:
    """Configure the claw_deps logger.

    Args:
        level: Log level name used when not verbose.
        verbose: Force DEBUG output.

    Returns:
        The configured package logger.
    """
    effective_level = "DEBUG" if verbose else level.upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, effective_level, logging.WARNING))
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
