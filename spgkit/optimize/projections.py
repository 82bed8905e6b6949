"""
Projectors onto simple convex sets.

Every projector follows the solver contract ``prj(dst, src) -> dst``: it
overwrites ``dst`` with the Euclidean projection of ``src`` and returns it.
``dst`` and ``src`` may be the same vector. NumPy arrays and torch tensors
are both accepted.
"""

from __future__ import annotations

from typing import Union

import numpy as np
import torch

from ..algebra import Vector, assign, check_compatible
from .core import Projector

Bound = Union[float, Vector, None]


def identity(dst: Vector, src: Vector) -> Vector:
    """Projector of an unconstrained problem: copy ``src`` into ``dst``."""
    return assign(dst, src)


def _bound_for(bound: Bound, like: Vector):
    """Convert a scalar or vector bound to something usable against ``like``."""
    if bound is None or np.isscalar(bound):
        return bound
    if isinstance(like, torch.Tensor):
        return torch.as_tensor(bound, dtype=like.dtype, device=like.device)
    return np.asarray(bound, dtype=like.dtype)


def box_projector(lower: Bound = None, upper: Bound = None) -> Projector:
    """
    Build the projector onto the box ``lower <= x <= upper``.

    Parameters
    ----------
    lower, upper:
        Scalar or vector bounds. ``None`` leaves the corresponding side
        unbounded. Vector bounds must have the shape of the variables.

    Raises
    ------
    ValueError
        If ``lower > upper`` for some component.
    """
    if lower is not None and upper is not None:
        lo = lower.detach().cpu().numpy() if isinstance(lower, torch.Tensor) else lower
        hi = upper.detach().cpu().numpy() if isinstance(upper, torch.Tensor) else upper
        if np.any(np.asarray(lo) > np.asarray(hi)):
            raise ValueError("Box bounds must satisfy lower <= upper.")

    def prj(dst: Vector, src: Vector) -> Vector:
        check_compatible(dst, src)
        lo = _bound_for(lower, src)
        hi = _bound_for(upper, src)
        if lo is None and hi is None:
            return assign(dst, src)
        if isinstance(src, torch.Tensor):
            # torch.clamp takes either two numbers or two tensors as bounds.
            if isinstance(lo, torch.Tensor) and hi is not None and np.isscalar(hi):
                hi = torch.full_like(src, hi)
            elif isinstance(hi, torch.Tensor) and lo is not None and np.isscalar(lo):
                lo = torch.full_like(src, lo)
            torch.clamp(src, min=lo, max=hi, out=dst)
        else:
            np.clip(src, lo, hi, out=dst)
        return dst

    return prj


def nonnegative(dst: Vector, src: Vector) -> Vector:
    """Projector onto the nonnegative orthant."""
    check_compatible(dst, src)
    if isinstance(src, torch.Tensor):
        torch.clamp(src, min=0, out=dst)
    else:
        np.maximum(src, 0, out=dst)
    return dst


__all__ = ["identity", "box_projector", "nonnegative"]
