"""Logging configuration for the file-mapper CLI.

Library modules only create loggers; this module decides where their records go.
Non-fatal traversal problems are written to stderr, one line each, colored by
level when the terminal supports it.
"""

import logging
import os
import sys
from typing import Optional, TextIO

LOGGER_NAME = "file_mapper"
LOG_LEVEL_ENV_VAR = "FILE_MAPPER_LOG_LEVEL"


class ColorFormatter(logging.Formatter):
    """Logging formatter that wraps each message in an ANSI color by level."""

    COLORS = {
        logging.INFO: "\033[32m",  # Green
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
        logging.CRITICAL: "\033[41m",  # Red background
    }
    RESET = "\033[0m"

    def __init__(self, fmt: Optional[str] = None, use_color: bool = True) -> None:
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.COLORS.get(record.levelno, "") if self.use_color else ""
        if color:
            message = f"{color}{message}{self.RESET}"
        return message


def resolve_level(quiet: bool) -> int:
    """Pick the threshold for the file_mapper logger.

    --quiet wins over everything; otherwise FILE_MAPPER_LOG_LEVEL may name a
    standard level (e.g. DEBUG); the default is WARNING.
    """
    if quiet:
        return logging.CRITICAL
    requested = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    level = logging.getLevelName(requested) if requested else logging.WARNING
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(quiet: bool = False, use_color: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Send file_mapper log records to stderr.

    Calling this again replaces the handler installed by the previous call.

    Args:
        quiet: Suppress non-fatal error lines.
        use_color: Color lines by level.
        stream: Destination stream. Defaults to the current sys.stderr.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_file_mapper_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(ColorFormatter("%(levelname)s: %(message)s", use_color=use_color))
    handler._file_mapper_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(resolve_level(quiet))
    return logger
