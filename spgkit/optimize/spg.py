"""
Spectral Projected Gradient method.

Implements version 2 ("continuous projected gradient direction") of the SPG
method to find a local minimizer of a differentiable function subject to
convex constraints. The feasible set is only known through a projector.

References:
    - E. G. Birgin, J. M. Martinez & M. Raydan, "Nonmonotone spectral
      projected gradient methods on convex sets", SIAM Journal on
      Optimization 10, pp. 1196-1211 (2000).
    - E. G. Birgin, J. M. Martinez & M. Raydan, "SPG: software for
      convex-constrained optimization", ACM Transactions on Mathematical
      Software 27, pp. 340-349 (2001).
"""

from __future__ import annotations

import dataclasses
import math
import sys
from typing import IO, Optional

from ..algebra import (
    Vector,
    assign,
    check_floating,
    clone,
    combine,
    empty_like,
    inner,
    norm2,
    norm_inf,
)
from ..diagnostics.core import assert_idempotent
from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .core import (
    AMAX,
    AMIN,
    FTOL,
    LAMBDA_MAX,
    LAMBDA_MIN,
    Evaluator,
    Projector,
    SPGInfo,
    SPGOptions,
    SPGResult,
    Status,
    get_reason,
)
from .line_search import FunctionHistory, armijo_accepts, safeguarded_step

logger = get_logger(__name__)


def default_printer(io: IO[str], info: SPGInfo) -> None:
    """Print one line of iteration information, preceded by a header at iteration 0."""
    if info.iter == 0:
        io.write(
            "# ITER   EVAL   PROJ             F(x)              ‖PG(X)‖_2 ‖PG(X)‖_∞\n"
            "# ---------------------------------------------------------------------\n"
        )
    marker = "(*)" if info.f <= info.fbest else "   "
    io.write(
        f" {info.iter:6d} {info.fcnt:6d} {info.pcnt:6d} {marker:3s} "
        f"{info.f:24.17e} {info.pgtwon:9.2e} {info.pginfn:9.2e}\n"
    )


def _options_from(options: Optional[SPGOptions], kwds: dict) -> SPGOptions:
    if options is None:
        return SPGOptions(**kwds)
    if kwds:
        return dataclasses.replace(options, **kwds)
    return options


def spg(
    fg: Evaluator,
    prj: Projector,
    x0: Vector,
    m: int,
    *,
    options: Optional[SPGOptions] = None,
    info: Optional[SPGInfo] = None,
    **kwds,
) -> SPGResult:
    """
    Minimize a function subject to convex constraints by the SPG method.

    The caller supplies ``fg`` to evaluate the objective function and its
    gradient and ``prj`` to project an arbitrary point onto the feasible
    set::

        def fg(x, g):
            g[...] = gradient_at(x)
            return function_value_at(x)

        def prj(dst, src):
            dst[...] = projection_of(src)
            return dst

    ``prj`` may be called with ``dst`` and ``src`` being the same vector and
    must be idempotent. Neither callback may keep a reference to the vectors
    it receives: the solver reuses them.

    Parameters
    ----------
    fg:
        Objective function and gradient evaluator.
    prj:
        Projector onto the feasible set.
    x0:
        Initial point (NumPy array or torch tensor of any shape). It is not
        modified; see :func:`spg_inplace` to work on the caller's vector.
    m:
        Number of previous function values considered by the nonmonotone
        line search. With ``m == 1`` a monotone Armijo line search is used.
    options:
        Solver parameters as an :class:`SPGOptions`. Keyword arguments
        (``eps1``, ``eps2``, ``eps3``, ``eta``, ``maxit``, ``maxfc``,
        ``verb``, ``printer``, ``io``) override its fields.
    info:
        Optional :class:`SPGInfo` to reset and fill with the final state.

    With ``verb`` true, each iteration is reported on ``io`` and the run
    ends with a ``# SUCCESS: ...`` line on ``io``. A ``# WARNING: ...``
    line for a failed run goes to ``io`` when one is given and to standard
    error otherwise.

    Returns
    -------
    SPGResult
        The best point found over the whole run and the final solver state.
        ``result.status`` is the authoritative termination reason.

    Raises
    ------
    ValueError
        If a parameter is invalid.
    TypeError
        If ``x0`` is not a floating-point NumPy array or torch tensor.
    ShapeMismatchError
        If a callback produces a vector of the wrong shape.
    """
    return spg_inplace(fg, prj, clone(x0), m, options=options, info=info, **kwds)


def spg_inplace(
    fg: Evaluator,
    prj: Projector,
    x: Vector,
    m: int,
    *,
    options: Optional[SPGOptions] = None,
    info: Optional[SPGInfo] = None,
    **kwds,
) -> SPGResult:
    """
    Same as :func:`spg` but ``x`` is used as the working iterate.

    On return ``x`` holds the last iterate, which may differ from the best
    point ``result.x``.
    """
    opts = _options_from(options, kwds)
    if isinstance(m, bool) or int(m) != m:
        raise ValueError(f"m must be an integer, got {m!r}.")
    m = int(m)
    if m < 1:
        raise ValueError(f"m must be >= 1, got {m}.")
    check_floating(x, "x")
    if info is None:
        info = SPGInfo()
    else:
        info.reset()
    logger.debug(
        "SPG start: m=%d eps1=%g eps2=%g eps3=%g eta=%g maxit=%s maxfc=%s",
        m, opts.eps1, opts.eps2, opts.eps3, opts.eta, opts.maxit, opts.maxfc,
    )
    xbest = _spg(fg, prj, x, m, opts, info)
    logger.info(
        "SPG finished after %d iterations, %d evaluations, %d projections: %s",
        info.iter, info.fcnt, info.pcnt, get_reason(info),
    )
    return SPGResult(x=xbest, info=info)


def _spg(
    fg: Evaluator,
    prj: Projector,
    x: Vector,
    m: int,
    opts: SPGOptions,
    ws: SPGInfo,
) -> Vector:
    eps1 = float(opts.eps1)
    eps2 = float(opts.eps2)
    eps3 = float(opts.eps3)
    eta = float(opts.eta)
    maxit = math.inf if opts.maxit is None else opts.maxit
    maxfc = math.inf if opts.maxfc is None else opts.maxfc
    verb = opts.verb
    printer = opts.printer or default_printer
    io = opts.io if opts.io is not None else sys.stdout

    it = 0
    fcnt = 0
    pcnt = 0
    status = Status.SEARCHING
    history = FunctionHistory(m)

    x0 = clone(x)
    g = empty_like(x)
    d = empty_like(x)
    s = empty_like(x)
    y = empty_like(x)
    g0 = empty_like(x)
    pg = empty_like(x)
    xbest = empty_like(x)
    lam = 0.0
    pgtwon = 0.0
    pginfn = 0.0

    # Project initial guess.
    prj(x, x)
    pcnt += 1
    if is_debug_enabled():
        assert_idempotent(prj, x)

    # Evaluate function and gradient.
    f = float(fg(x, g))
    fcnt += 1
    if is_debug_enabled() and not math.isfinite(f):
        raise ValueError(f"Objective is not finite at the initial point: {f}.")
    fbest = f
    assign(xbest, x)

    while True:
        # Continuous projected gradient: pg = (x - prj(x - eta*g))/eta.
        combine(pg, 1, x, -eta, g)
        combine(pg, 1 / eta, x, -1 / eta, prj(pg, pg))
        pcnt += 1
        pgtwon = norm2(pg)
        pginfn = norm_inf(pg)

        logger.debug(
            "iter=%d fcnt=%d pcnt=%d f=%.17g pgtwon=%.3g pginfn=%.3g",
            it, fcnt, pcnt, f, pgtwon, pginfn,
        )
        _publish(ws, f, fbest, pginfn, pgtwon, it, fcnt, pcnt, status)
        if verb:
            printer(io, ws)

        if pginfn <= eps1:
            status = Status.INFNORM_CONVERGENCE
            break
        if pgtwon <= eps2:
            status = Status.TWONORM_CONVERGENCE
            break
        if it >= maxit:
            status = Status.TOO_MANY_ITERATIONS
            break
        if fcnt >= maxfc:
            status = Status.TOO_MANY_EVALUATIONS
            break

        # Reference value of the nonmonotone line search.
        fmax = history.record(it, f)

        # Spectral steplength.
        if it == 0:
            lam = min(LAMBDA_MAX, max(LAMBDA_MIN, 1.0 / pginfn))
        else:
            combine(s, 1, x, -1, x0)
            combine(y, 1, g, -1, g0)
            sty = inner(s, y)
            if sty > 0.0:
                # Safeguarded Barzilai & Borwein steplength.
                lam = min(LAMBDA_MAX, max(LAMBDA_MIN, inner(s, s) / sty))
            else:
                lam = LAMBDA_MAX

        assign(x0, x)
        assign(g0, g)
        f0 = f

        # Spectral projected gradient direction and delta = <g0,d>.
        prj(x, combine(x, 1, x0, -lam, g0))
        pcnt += 1
        combine(d, 1, x, -1, x0)
        delta = inner(g0, d)

        # Nonmonotone line search.
        stp = 1.0
        while True:
            f = float(fg(x, g))
            fcnt += 1

            if f < fbest:
                fbest = f
                assign(xbest, x)

            if armijo_accepts(f, fmax, stp, delta, FTOL):
                break
            if fcnt >= maxfc:
                status = Status.TOO_MANY_EVALUATIONS
                break

            stp = safeguarded_step(stp, delta, f, f0, AMIN, AMAX)
            combine(x, 1, x0, stp, d)

        if status != Status.SEARCHING:
            # Evaluation budget exhausted inside the line search.
            break
        if abs(f - f0) < eps3 * max(abs(f), abs(f0)):
            status = Status.FUNCTION_STAGNATION
            break

        it += 1

    _publish(ws, f, fbest, pginfn, pgtwon, it, fcnt, pcnt, status)
    if verb:
        reason = get_reason(ws)
        if status < 0:
            warn_io = opts.io if opts.io is not None else sys.stderr
            warn_io.write(f"# WARNING: {reason}\n")
        else:
            io.write(f"# SUCCESS: {reason}\n")
    return xbest


def _publish(
    ws: SPGInfo,
    f: float,
    fbest: float,
    pginfn: float,
    pgtwon: float,
    it: int,
    fcnt: int,
    pcnt: int,
    status: Status,
) -> None:
    ws.f = f
    ws.fbest = fbest
    ws.pginfn = pginfn
    ws.pgtwon = pgtwon
    ws.iter = it
    ws.fcnt = fcnt
    ws.pcnt = pcnt
    ws.status = status


__all__ = ["spg", "spg_inplace", "default_printer"]
