"""spgkit - spectral projected gradient optimization on NumPy and torch arrays."""

__version__ = "0.1.0"

# Vector algebra
from .algebra import (
    ShapeMismatchError,
    Vector,
    assign,
    clone,
    combine,
    empty_like,
    inner,
    inner_selected,
    inner_weighted,
    norm1,
    norm2,
    norm_inf,
    scale,
    swap,
    update,
)

# Diagnostics
from .diagnostics import (
    approx_grad,
    assert_idempotent,
    check_gradient,
    debug_context,
    is_debug_enabled,
    is_idempotent,
    set_debug_enabled,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Optimization
from .optimize import (
    SPGInfo,
    SPGOptions,
    SPGResult,
    Status,
    box_projector,
    default_printer,
    get_reason,
    identity,
    nonnegative,
    spg,
    spg_inplace,
)

__all__ = [
    "__version__",
    # Vector algebra
    "Vector",
    "ShapeMismatchError",
    "norm2",
    "norm1",
    "norm_inf",
    "inner",
    "inner_weighted",
    "inner_selected",
    "swap",
    "update",
    "combine",
    "scale",
    "assign",
    "empty_like",
    "clone",
    # Optimization
    "spg",
    "spg_inplace",
    "SPGInfo",
    "SPGOptions",
    "SPGResult",
    "Status",
    "get_reason",
    "default_printer",
    "identity",
    "box_projector",
    "nonnegative",
    # Diagnostics
    "approx_grad",
    "check_gradient",
    "is_idempotent",
    "assert_idempotent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
