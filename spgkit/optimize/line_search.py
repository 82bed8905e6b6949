"""Building blocks of the nonmonotone line search used by SPG.

References:
    - E. G. Birgin, J. M. Martinez & M. Raydan, "Nonmonotone spectral
      projected gradient methods on convex sets", SIAM J. Optim. 10 (2000).
    - L. Grippo, F. Lampariello & S. Lucidi, "A nonmonotone line search
      technique for Newton's method", SIAM J. Numer. Anal. 23 (1986).
"""

from __future__ import annotations

import numpy as np

from .core import AMAX, AMIN, FTOL


class FunctionHistory:
    """
    Function values of the last ``m`` iterations.

    With ``m > 1`` the values live in a circular buffer initialized to
    ``-inf``, so the maximum over the window only involves the iterations
    recorded so far. With ``m == 1`` no buffer is kept and the reference
    value is the current function value (monotone line search).
    """

    def __init__(self, m: int) -> None:
        if m < 1:
            raise ValueError(f"m must be >= 1, got {m}.")
        self.m = int(m)
        self._values = np.full(self.m, -np.inf) if self.m > 1 else None

    def record(self, iteration: int, f: float) -> float:
        """Store ``f`` as the value of ``iteration`` and return the window maximum."""
        if self._values is None:
            return f
        self._values[iteration % self.m] = f
        return float(np.max(self._values))


def armijo_accepts(
    f: float, fmax: float, stp: float, delta: float, ftol: float = FTOL
) -> bool:
    """Nonmonotone Armijo test ``f <= fmax + stp*ftol*delta``."""
    return f <= fmax + stp * ftol * delta


def safeguarded_step(
    stp: float,
    delta: float,
    f: float,
    f0: float,
    amin: float = AMIN,
    amax: float = AMAX,
) -> float:
    """
    Return the next trial step after a rejected step ``stp``.

    The minimizer ``q/r`` of the quadratic interpolating ``f0``, the
    directional derivative ``delta`` at step 0 and ``f`` at ``stp`` is used
    when it lies in ``[amin*stp, amax*stp]``; otherwise the step is halved.
    """
    q = -delta * (stp * stp)
    r = (f - f0 - stp * delta) * 2.0
    if r > 0.0 and amin * r <= q <= amax * stp * r:
        return q / r
    return stp * 0.5


__all__ = ["FunctionHistory", "armijo_accepts", "safeguarded_step"]
