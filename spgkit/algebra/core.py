"""
Basic operations on *vectors* for numerical optimization.

Arrays of any rank are considered as vectors; the only requirement when
combining vectors is that they have the same kind (NumPy or torch) and the
same shape. Elements must be real.

Reductions accumulate in the element precision of their arguments and return
a Python ``float``. In-place operations write into a caller-owned destination
and never rebind or resize it.

Coefficients equal to 0, 1 or -1 are handled by dedicated branches. This is a
guarantee, not only an optimization: a source whose coefficient is zero is
never read, so it may hold garbage or be uninitialized.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np
import torch

from .backends import ops_for
from .checks import (
    Vector,
    check_compatible,
    check_floating,
    check_vector,
    same_buffer,
)

Selection = Union[Sequence[int], range, np.ndarray, torch.Tensor]


def norm2(v: Vector) -> float:
    """Return the Euclidean (L2) norm of ``v``."""
    check_vector(v, "v")
    return ops_for(v).norm2(v)


def norm1(v: Vector) -> float:
    """Return the L1 norm of ``v``."""
    check_vector(v, "v")
    return ops_for(v).norm1(v)


def norm_inf(v: Vector) -> float:
    """Return the infinite norm of ``v`` (0 for an empty vector)."""
    check_vector(v, "v")
    return ops_for(v).norm_inf(v)


def _is_selection(arg: object) -> bool:
    if isinstance(arg, (list, tuple, range)):
        return True
    if isinstance(arg, np.ndarray):
        return arg.dtype.kind in "iu"
    if isinstance(arg, torch.Tensor):
        return not arg.is_floating_point() and not arg.is_complex()
    return False


def _as_indices(sel: Selection, n: int) -> np.ndarray:
    if isinstance(sel, torch.Tensor):
        sel = sel.detach().cpu().numpy()
    arr = np.asarray(sel)
    if arr.size == 0:
        return np.empty(0, dtype=np.intp)
    if arr.ndim != 1 or arr.dtype.kind not in "iu":
        raise TypeError(
            "Selection must be a one-dimensional sequence of integer indices."
        )
    bad = (arr < 0) | (arr >= n)
    if np.any(bad):
        j = int(arr[bad][0])
        raise IndexError(
            f"Selection index {j} out of range for vector of size {n} "
            f"(valid indices are 0..{n - 1})."
        )
    return arr.astype(np.intp, copy=False)


def inner(a, b, c: Optional[Vector] = None) -> float:
    """
    Compute an inner product.

    The call ``inner(x, y)`` returns the inner (scalar) product of ``x`` and
    ``y``. With three arguments, ``inner(w, x, y)`` returns the triple inner
    product ``sum(w*x*y)`` when ``w`` is a real vector, and
    ``inner(sel, x, y)`` returns the sum of ``x[j]*y[j]`` over the flat
    indices ``j`` in ``sel`` when the first argument is a list, tuple, range
    or integer-typed array.

    Raises
    ------
    ShapeMismatchError
        If the vectors do not have the same shape.
    IndexError
        If a selection index is out of range.
    """
    if c is None:
        check_compatible(a, b)
        return ops_for(a).dot(a, b)
    if _is_selection(a):
        return inner_selected(a, b, c)
    return inner_weighted(a, b, c)


def inner_weighted(w: Vector, x: Vector, y: Vector) -> float:
    """Return the triple inner product ``sum(w[i]*x[i]*y[i])``."""
    check_compatible(w, x, y)
    return ops_for(w).dot3(w, x, y)


def inner_selected(sel: Selection, x: Vector, y: Vector) -> float:
    """Return ``sum(x[j]*y[j] for j in sel)`` with ``j`` a 0-based flat index."""
    check_compatible(x, y)
    n = int(np.prod(x.shape, dtype=np.int64))
    idx = _as_indices(sel, n)
    return ops_for(x).dot_sel(idx, x, y)


def swap(x: Vector, y: Vector) -> None:
    """Exchange the contents of ``x`` and ``y`` in place."""
    check_compatible(x, y)
    if same_buffer(x, y):
        return
    ops_for(x).swap(x, y)


def _update(ops, dst: Vector, alpha: float, x: Vector) -> None:
    if alpha == 1:
        ops.add(dst, x, dst)
    elif alpha == -1:
        ops.sub(dst, x, dst)
    elif alpha != 0:
        ops.axpy(dst, alpha, x)


def _combine1(ops, dst: Vector, alpha: float, x: Vector) -> None:
    if alpha == 0:
        ops.zero(dst)
    elif alpha == 1:
        if not same_buffer(dst, x):
            ops.copy(dst, x)
    elif alpha == -1:
        ops.neg(x, dst)
    else:
        ops.mul(x, alpha, dst)


def _combine2(
    ops, dst: Vector, alpha: float, x: Vector, beta: float, y: Vector
) -> None:
    if alpha == 1 and beta == 1:
        ops.add(x, y, dst)
    elif alpha == 1 and beta == -1:
        ops.sub(x, y, dst)
    elif alpha == -1 and beta == 1:
        ops.sub(y, x, dst)
    elif alpha == -1 and beta == -1:
        ops.add(x, y, dst)
        ops.neg(dst, dst)
    else:
        # Two passes: the first writes dst, so it must consume the source
        # that dst aliases, if any.
        if same_buffer(dst, y):
            if same_buffer(dst, x):
                _combine1(ops, dst, alpha + beta, x)
                return
            alpha, x, beta, y = beta, y, alpha, x
        _combine1(ops, dst, alpha, x)
        _update(ops, dst, beta, y)


def update(dst: Vector, alpha: float, x: Vector) -> Vector:
    """
    Increment ``dst`` by ``alpha*x`` in place and return ``dst``.

    If ``alpha`` is zero, ``dst`` is left unchanged and ``x`` is not read.
    If ``alpha`` is 1 or -1, ``x`` is added or subtracted without scaling.
    ``dst`` must have a floating-point dtype.
    """
    check_compatible(dst, x)
    check_floating(dst)
    _update(ops_for(dst), dst, float(alpha), x)
    return dst


def combine(
    dst: Vector,
    alpha: float,
    x: Vector,
    beta: Optional[float] = None,
    y: Optional[Vector] = None,
) -> Vector:
    """
    Store a linear combination of vectors into ``dst`` and return ``dst``.

    The calls::

        combine(dst, alpha, x)
        combine(dst, alpha, x, beta, y)

    store ``alpha*x`` and ``alpha*x + beta*y`` into ``dst``. If ``alpha``
    (resp. ``beta``) is zero, the contents of ``x`` (resp. ``y``) are not
    used. The destination may be one of the sources, so the two following
    lines produce the same result::

        combine(dst, 1, dst, alpha, x)
        update(dst, alpha, x)

    ``dst`` must have a floating-point dtype; integer vectors are only
    accepted as sources and by the reductions.
    """
    if (beta is None) != (y is None):
        raise TypeError(
            "combine expects (dst, alpha, x) or (dst, alpha, x, beta, y)."
        )
    ops = ops_for(dst)
    if y is None:
        check_compatible(dst, x)
        check_floating(dst)
        _combine1(ops, dst, float(alpha), x)
        return dst
    check_compatible(dst, x, y)
    check_floating(dst)
    alpha = float(alpha)
    beta = float(beta)
    if alpha == 0:
        _combine1(ops, dst, beta, y)
    elif beta == 0:
        _combine1(ops, dst, alpha, x)
    else:
        _combine2(ops, dst, alpha, x, beta, y)
    return dst


def scale(dst: Vector, alpha: float) -> Vector:
    """Multiply ``dst`` by ``alpha`` in place and return it."""
    return combine(dst, alpha, dst)


def assign(dst: Vector, src: Vector) -> Vector:
    """Copy the contents of ``src`` into ``dst`` and return ``dst``."""
    return combine(dst, 1, src)


def empty_like(x: Vector) -> Vector:
    """Return a new uninitialized contiguous vector shaped like ``x``."""
    check_vector(x)
    return ops_for(x).empty_like(x)


def clone(x: Vector) -> Vector:
    """Return a new contiguous vector holding a copy of ``x``."""
    check_vector(x)
    return ops_for(x).clone(x)


__all__ = [
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
