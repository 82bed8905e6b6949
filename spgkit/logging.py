"""Logging utilities for spgkit.

The ``spgkit`` package logger owns the only handler (stderr, WARNING by
default) and does not propagate to the root logger. Module loggers obtained
through :func:`get_logger` are its children and carry no handler of their
own, so changing the level or the stream of the package logger reconfigures
every module at once.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

_PACKAGE = "spgkit"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _as_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(_PACKAGE)
    if not logger.handlers:
        logger.setLevel(logging.WARNING)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger of an spgkit module.

    Args:
        name: Module name, typically ``__name__``. Names outside the package
            are placed under it (``"foo"`` gives ``"spgkit.foo"``).

    Example:
        >>> from spgkit.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Starting SPG run")
    """
    _package_logger()
    if name != _PACKAGE and not name.startswith(_PACKAGE + "."):
        name = f"{_PACKAGE}.{name}"
    return logging.getLogger(name)


def set_log_level(level: int | str) -> None:
    """Set the logging level of the package.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').
    """
    _package_logger().setLevel(_as_level(level))


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Replace the package handler and set the level.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).

    Example:
        >>> from spgkit.logging import configure_logging
        >>> import logging
        >>> configure_logging(level=logging.DEBUG)
    """
    logger = _package_logger()
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_as_level(level))


__all__ = ["get_logger", "set_log_level", "configure_logging"]
