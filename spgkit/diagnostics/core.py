"""Checks of the callbacks supplied to the solver.

The solver trusts its callbacks: the gradient written by the evaluator is
assumed correct and the projector is assumed idempotent. These helpers verify
both on a given point.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from ..algebra import Vector, clone, combine, empty_like, norm_inf

Evaluator = Callable[[Vector, Vector], float]
Projector = Callable[[Vector, Vector], Vector]


def approx_grad(fg: Evaluator, x: Vector, eps: float = 1e-6) -> Vector:
    """
    Compute a central-difference approximation of the gradient at ``x``.

    Parameters
    ----------
    fg:
        Evaluator ``fg(x, g) -> f``; only its return value is used.
    x:
        Point where the gradient is approximated. It is not modified.
    eps:
        Perturbation size for finite differences.

    Returns
    -------
    Vector
        Approximate gradient, of the same kind and shape as ``x``.
    """
    if eps <= 0:
        raise ValueError("eps must be positive")
    xp = clone(x)
    scratch = empty_like(x)
    grad = empty_like(x)
    xp_flat = xp.reshape(-1)
    grad_flat = grad.reshape(-1)
    for i in range(xp_flat.shape[0]):
        xi = float(xp_flat[i])
        xp_flat[i] = xi + eps
        f_plus = float(fg(xp, scratch))
        xp_flat[i] = xi - eps
        f_minus = float(fg(xp, scratch))
        xp_flat[i] = xi
        grad_flat[i] = (f_plus - f_minus) / (2.0 * eps)
    return grad


def check_gradient(fg: Evaluator, x: Vector, eps: float = 1e-6) -> float:
    """
    Return the largest absolute deviation between the gradient written by
    ``fg`` and its finite-difference approximation at ``x``.
    """
    g = empty_like(x)
    fg(clone(x), g)
    approx = approx_grad(fg, x, eps=eps)
    return norm_inf(combine(approx, 1, g, -1, approx))


def is_idempotent(prj: Projector, x: Vector, atol: float = 1e-12) -> bool:
    """Check that ``prj(prj(x)) == prj(x)`` within ``atol`` (infinite norm)."""
    once = prj(empty_like(x), x)
    twice = prj(empty_like(x), once)
    deviation = norm_inf(combine(twice, 1, twice, -1, once))
    return bool(np.isfinite(deviation)) and deviation <= atol


def assert_idempotent(prj: Projector, x: Vector, atol: float = 1e-12) -> None:
    """
    Assert that the projector is idempotent at ``x``.

    Raises
    ------
    ValueError
        If a second application of ``prj`` moves the projected point.
    """
    if not is_idempotent(prj, x, atol=atol):
        raise ValueError(
            "Projector is not idempotent: prj(prj(x)) differs from prj(x) "
            f"by more than {atol}."
        )


__all__ = [
    "approx_grad",
    "check_gradient",
    "is_idempotent",
    "assert_idempotent",
]
