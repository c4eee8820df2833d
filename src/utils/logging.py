"""Logging setup for CuraLink.

Every module logs under the ``curalink`` application logger. The CLI
configures it once with a single console handler; library callers that
never configure it get no output because the logger does not propagate.
"""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "curalink"
PACKAGE_PREFIX = "src."

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _console_handler(
    level: int, stream: TextIO | None, format_string: str, date_format: str
) -> logging.Handler:
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string, datefmt=date_format))
    return handler


def configure_logging(
    level: str | int | None = None,
    stream: TextIO | None = None,
    format_string: str = LOG_FORMAT,
    date_format: str = DATE_FORMAT,
) -> logging.Logger:
    """Configure and return the ``curalink`` logger.

    The first call installs one console handler writing to ``stream``
    (stderr by default). Later calls only change the level, so repeated
    CLI invocations in one process never duplicate output.

    Args:
        level: Level name (case-insensitive) or number. Unknown names and
            None fall back to INFO.
        stream: Destination for the console handler on first configuration.
        format_string: Format string for log records.
        date_format: Format string for timestamps.
    """
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    log_level = _resolve_level(level)
    logger.setLevel(log_level)

    if _configured:
        for handler in logger.handlers:
            handler.setLevel(log_level)
        return logger

    logger.handlers.clear()
    logger.addHandler(_console_handler(log_level, stream, format_string, date_format))
    logger.propagate = False
    _configured = True
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the application child logger for ``name``.

    Module paths are mapped under ``curalink``: ``get_logger(__name__)`` in
    ``src/relevance/service.py`` yields ``curalink.relevance.service``.
    """
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    if name.startswith(PACKAGE_PREFIX):
        name = name[len(PACKAGE_PREFIX) :]
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Drop handlers and level so the next configure starts fresh."""
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    _configured = False
