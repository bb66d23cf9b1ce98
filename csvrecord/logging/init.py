from __future__ import annotations

import logging
import sys
from typing import TextIO

"""Logging setup for csvrecord.

Package modules log through child loggers of ``csvrecord``
(logging.getLogger(__name__)) and never install handlers themselves. An
application that wants the labeled console output (INFO|WARN|ERROR|SUMMARY)
calls setup_logging() once.

The SUMMARY level name is registered at import so batch summaries render as
``SUMMARY`` under any handler, configured here or not.
"""

__all__ = [
    "LOGGER_NAME",
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "setup_logging",
    "log_summary",
]

LOGGER_NAME = "csvrecord"

# Between INFO=20 and WARNING=30
SUMMARY_LEVEL = 25
logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")


class LabeledFormatter(logging.Formatter):
    """Formatter emitting ``LABEL message``.

    WARNING is shortened to WARN; levels without a label fall back to the
    registered level name.
    """

    LEVEL_LABELS = {
        logging.WARNING: "WARN",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        message = f"{label} {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


class _ConsoleHandler(logging.StreamHandler):
    """Handler installed by setup_logging (lets repeated calls find it)."""


def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """Attach the labeled console handler to the ``csvrecord`` logger.

    Repeated calls reuse the installed handler and only update its level.
    Propagation to the root logger is disabled to avoid duplicate output.

    Args:
        level: logger and handler level
        stream: output stream (stdout when None)

    Returns:
        The ``csvrecord`` logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in logger.handlers:
        if isinstance(handler, _ConsoleHandler):
            handler.setLevel(level)
            return logger

    handler = _ConsoleHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def log_summary(message: str, logger: logging.Logger | None = None) -> None:
    """Log ``message`` at SUMMARY level (on the ``csvrecord`` logger by default)."""
    (logger or logging.getLogger(LOGGER_NAME)).log(SUMMARY_LEVEL, message)
