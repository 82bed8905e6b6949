"""Debug mode for spgkit.

In debug mode the solver checks the caller's contracts that it otherwise
trusts: the projector must be idempotent and the objective must be finite at
the initial point. The initial state comes from the ``SPGKIT_DEBUG``
environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "SPGKIT_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})

_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


def is_debug_enabled() -> bool:
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Globally enable or disable debug mode."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily enable (or disable) debug mode.

    Example
    -------
    >>> with debug_context():
    ...     pass  # contract checks active here
    """
    previous = is_debug_enabled()
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)


__all__ = ["is_debug_enabled", "set_debug_enabled", "debug_context"]
