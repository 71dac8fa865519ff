"""
Logging utilities for the solver command-line tools.

Diagnostics go to stderr through a single handler on the package logger so
standard output carries only puzzle results.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Union

PACKAGE_LOGGER = "aoc_toolkit"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class StderrLogHandler(logging.StreamHandler):
    """
    Stream handler marked as owned by the toolkit.

    Used so configure_logging() can find and replace its own handler
    without touching handlers installed by the host application.
    """

    def __init__(self, stream: Optional[TextIO] = None, level: int = logging.NOTSET):
        super().__init__(stream if stream is not None else sys.stderr)
        self.setLevel(level)
        self.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    stream: Optional[TextIO] = None,
) -> StderrLogHandler:
    """
    Attach a StderrLogHandler to the package logger.

    Calling it again replaces the previous toolkit handler, so repeated runs
    in one process do not duplicate log lines.

    Args:
        level: Level for the package logger (name or number).
        stream: Stream to write to. Defaults to sys.stderr.

    Returns:
        The attached handler (for later removal).
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    detach_handlers()
    handler = StderrLogHandler(stream)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def detach_handlers() -> None:
    """Remove every StderrLogHandler from the package logger."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, StderrLogHandler):
            logger.removeHandler(handler)
