"""Spectral projected gradient optimization.

Example
-------
>>> import numpy as np
>>> from spgkit.optimize import box_projector, spg
>>> def fg(x, g):
...     g[...] = 2 * x
...     return float(x @ x)
>>> res = spg(fg, box_projector(lower=1.0), np.array([10.0]), m=1)
>>> res.x
array([1.])
>>> res.success
True
"""

from .core import (
    REASON,
    Evaluator,
    Printer,
    Projector,
    SPGInfo,
    SPGOptions,
    SPGResult,
    Status,
    get_reason,
)
from .line_search import FunctionHistory, armijo_accepts, safeguarded_step
from .projections import box_projector, identity, nonnegative
from .spg import default_printer, spg, spg_inplace

__all__ = [
    "Evaluator",
    "Projector",
    "Printer",
    "Status",
    "REASON",
    "SPGInfo",
    "SPGOptions",
    "SPGResult",
    "get_reason",
    "FunctionHistory",
    "armijo_accepts",
    "safeguarded_step",
    "identity",
    "box_projector",
    "nonnegative",
    "spg",
    "spg_inplace",
    "default_printer",
]
