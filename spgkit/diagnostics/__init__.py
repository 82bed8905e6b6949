"""Diagnostics and debugging utilities for spgkit."""

from .core import (
    approx_grad,
    assert_idempotent,
    check_gradient,
    is_idempotent,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "approx_grad",
    "check_gradient",
    "is_idempotent",
    "assert_idempotent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
