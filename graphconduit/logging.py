"""Logging for the graph algorithms and the command line.

Each module creates its logger with ``get_logger(__name__)``. The searches
log their outcome at DEBUG (goal reached, frontier exhausted, circuit or
cycle found). WARNING is kept for results that may be wrong: a negative
edge weight seen by ``dijkstra`` or ``astar``, and an unparsable CSV weight
replaced by 1.0. ``load_graph`` reports what it loaded at INFO.

The ``graphconduit`` command calls :func:`configure_logging` once from its
``--verbose``/``--log-level`` options; loggers created afterwards pick up
the same level, stream and format.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_PACKAGE = "graphconduit"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_level = logging.WARNING
_format = _DEFAULT_FORMAT
_stream: Optional[TextIO] = None

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _attach_handler(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(_stream if _stream is not None else sys.stderr)
    handler.setLevel(_level)
    handler.setFormatter(logging.Formatter(_format))
    logger.addHandler(handler)
    logger.setLevel(_level)
    logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a ``graphconduit.*`` logger.

    Names outside the package are prefixed, so ``get_logger("shell")``
    and ``get_logger("graphconduit.shell")`` return the same logger.

    Example:
        >>> from graphconduit.logging import get_logger
        >>> logger = get_logger("graphconduit.graphs.shortest")
        >>> logger.warning("Negative edge weight encountered")
    """
    if name is None:
        name = _PACKAGE
    logger_name = name if name.startswith(_PACKAGE) else f"{_PACKAGE}.{name}"

    if logger_name not in _loggers:
        logger = logging.getLogger(logger_name)
        _attach_handler(logger)
        _loggers[logger_name] = logger
    return _loggers[logger_name]


def set_log_level(level: int | str) -> None:
    """Change the level of every package logger, keeping their handlers.

    Args:
        level: ``logging.DEBUG`` etc. or a case-insensitive name such as
            ``"debug"``. Unknown names fall back to WARNING.
    """
    global _level
    _level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers:
            handler.setLevel(_level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Replace the handler of every package logger.

    Args:
        level: Logging level (default: WARNING).
        format_string: Record format; ``[LEVEL] logger: message`` if None.
        stream: Output stream (default: sys.stderr).
    """
    global _level, _format, _stream
    _level = _coerce_level(level)
    _format = format_string or _DEFAULT_FORMAT
    _stream = stream

    for logger in _loggers.values():
        _attach_handler(logger)
