"""Elementwise kernels for NumPy arrays and torch tensors.

Both backends expose the same small set of in-place kernels so that
:mod:`spgkit.algebra.core` can express the coefficient special cases once.
Kernels assume their arguments were validated; an ``out`` argument may be the
same buffer as any input.
"""

from __future__ import annotations

import math

import numpy as np
import torch


class NumpyOps:
    """Kernels for ``numpy.ndarray`` vectors."""

    @staticmethod
    def add(x, y, out):
        np.add(x, y, out=out)

    @staticmethod
    def sub(x, y, out):
        np.subtract(x, y, out=out)

    @staticmethod
    def neg(x, out):
        np.negative(x, out=out)

    @staticmethod
    def mul(x, a: float, out):
        np.multiply(x, a, out=out)

    @staticmethod
    def zero(out):
        out.fill(0)

    @staticmethod
    def copy(out, x):
        np.copyto(out, x)

    @staticmethod
    def axpy(out, a: float, x):
        # NumPy has no fused a*x+y ufunc; the scaled term is a temporary.
        np.add(out, np.multiply(x, a), out=out)

    @staticmethod
    def swap(x, y):
        tmp = x.copy()
        np.copyto(x, y)
        np.copyto(y, tmp)

    @staticmethod
    def dot(x, y) -> float:
        return float(np.vdot(x, y))

    @staticmethod
    def dot3(w, x, y) -> float:
        return float(
            np.einsum("i,i,i->", w.reshape(-1), x.reshape(-1), y.reshape(-1))
        )

    @staticmethod
    def dot_sel(sel: np.ndarray, x, y) -> float:
        if sel.size == 0:
            return 0.0
        xf = x.reshape(-1)
        yf = y.reshape(-1)
        return float(np.dot(xf[sel], yf[sel]))

    @staticmethod
    def norm2(v) -> float:
        return math.sqrt(float(np.vdot(v, v)))

    @staticmethod
    def norm1(v) -> float:
        return float(np.sum(np.abs(v)))

    @staticmethod
    def norm_inf(v) -> float:
        if v.size == 0:
            return 0.0
        return float(np.max(np.abs(v)))

    @staticmethod
    def empty_like(x):
        return np.empty_like(x, order="C")

    @staticmethod
    def clone(x):
        return np.array(x, copy=True, order="C")


class TorchOps:
    """Kernels for ``torch.Tensor`` vectors (any device)."""

    @staticmethod
    def add(x, y, out):
        torch.add(x, y, out=out)

    @staticmethod
    def sub(x, y, out):
        torch.sub(x, y, out=out)

    @staticmethod
    def neg(x, out):
        torch.neg(x, out=out)

    @staticmethod
    def mul(x, a: float, out):
        torch.mul(x, a, out=out)

    @staticmethod
    def zero(out):
        out.zero_()

    @staticmethod
    def copy(out, x):
        out.copy_(x)

    @staticmethod
    def axpy(out, a: float, x):
        out.add_(x, alpha=a)

    @staticmethod
    def swap(x, y):
        tmp = x.clone()
        x.copy_(y)
        y.copy_(tmp)

    @staticmethod
    def dot(x, y) -> float:
        return float(torch.sum(x * y).item())

    @staticmethod
    def dot3(w, x, y) -> float:
        return float(torch.sum(w * x * y).item())

    @staticmethod
    def dot_sel(sel: np.ndarray, x, y) -> float:
        if sel.size == 0:
            return 0.0
        idx = torch.as_tensor(sel, dtype=torch.long, device=x.device)
        xf = x.reshape(-1)
        yf = y.reshape(-1)
        return float(torch.sum(xf[idx] * yf[idx]).item())

    @staticmethod
    def norm2(v) -> float:
        return math.sqrt(float(torch.sum(v * v).item()))

    @staticmethod
    def norm1(v) -> float:
        return float(torch.sum(torch.abs(v)).item())

    @staticmethod
    def norm_inf(v) -> float:
        if v.numel() == 0:
            return 0.0
        return float(torch.max(torch.abs(v)).item())

    @staticmethod
    def empty_like(x):
        return torch.empty_like(
            x, requires_grad=False, memory_format=torch.contiguous_format
        )

    @staticmethod
    def clone(x):
        return x.detach().clone(memory_format=torch.contiguous_format)


def ops_for(x) -> type:
    """Return the kernel namespace matching the kind of ``x``."""
    if isinstance(x, torch.Tensor):
        return TorchOps
    return NumpyOps


__all__ = ["NumpyOps", "TorchOps", "ops_for"]
