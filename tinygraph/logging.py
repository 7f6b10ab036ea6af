"""Logging utilities for tinygraph.

Loggers live under the ``tinygraph`` namespace, write to stderr and are
quiet (WARNING) unless an application turns them up.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_BASE_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = _BASE_FORMAT

# None means "sys.stderr at handler creation time"
_default_stream: Optional[TextIO] = None

_loggers: dict[str, logging.Logger] = {}


def _make_handler(level: int, format_string: str) -> logging.Handler:
    stream = _default_stream if _default_stream is not None else sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string))
    return handler


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached so each one gets exactly one handler. Pass
    ``__name__`` from the calling module.

    Args:
        name: Logger name. If None, returns the package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from tinygraph.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Added vertex %s", "A")
    """
    if name is None:
        name = "tinygraph"

    if name == "tinygraph" or name.startswith("tinygraph."):
        logger_name = name
    else:
        logger_name = f"tinygraph.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL, _DEFAULT_FORMAT))
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every tinygraph logger, existing and future.

    Args:
        level: Logging level (logging.DEBUG, ...) or its name ('DEBUG', ...).
            Unknown names fall back to WARNING.
    """
    level = _resolve_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Configure level, format and output stream for tinygraph logging.

    Replaces the handlers of existing loggers and becomes the default for
    loggers created afterwards. Call once at application startup.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default
            ``[LEVEL] name: message`` layout.
        stream: Output stream (default: sys.stderr).

    Example:
        >>> import logging
        >>> from tinygraph.logging import configure_logging
        >>> configure_logging(level=logging.DEBUG)
    """
    global _DEFAULT_LEVEL, _DEFAULT_FORMAT, _default_stream

    _DEFAULT_LEVEL = _resolve_level(level)
    _DEFAULT_FORMAT = format_string if format_string is not None else _BASE_FORMAT
    _default_stream = stream

    for logger in _loggers.values():
        logger.setLevel(_DEFAULT_LEVEL)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL, _DEFAULT_FORMAT))
