"""Generic vector algebra for large-scale optimization.

Example
-------
>>> import numpy as np
>>> from spgkit.algebra import combine, inner
>>> x = np.array([1.0, 2.0])
>>> d = np.array([0.5, -1.0])
>>> combine(x, 1, x, 2.0, d)
array([2., 0.])
>>> inner(x, d)
1.0
"""

from .checks import (
    ShapeMismatchError,
    Vector,
    check_compatible,
    check_floating,
    is_vector,
    same_buffer,
)
from .core import (
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

__all__ = [
    "Vector",
    "ShapeMismatchError",
    "is_vector",
    "check_compatible",
    "check_floating",
    "same_buffer",
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
]
