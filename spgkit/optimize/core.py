"""Core interfaces shared by the SPG solver and its helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import IO, Callable, Optional, Union

from ..algebra import Vector

Evaluator = Callable[[Vector, Vector], float]
Projector = Callable[[Vector, Vector], Vector]

# Fixed constants of the published algorithm.
LAMBDA_MIN = 1e-30
LAMBDA_MAX = 1e30
FTOL = 1e-4
AMIN = 0.1
AMAX = 0.9


class Status(IntEnum):
    """Termination status of an SPG run; negative values are failures."""

    SEARCHING = 0
    INFNORM_CONVERGENCE = 1
    TWONORM_CONVERGENCE = 2
    FUNCTION_STAGNATION = 3
    TOO_MANY_ITERATIONS = -1
    TOO_MANY_EVALUATIONS = -2


REASON = {
    Status.SEARCHING: "Work in progress",
    Status.INFNORM_CONVERGENCE: "Convergence with projected gradient infinite-norm",
    Status.TWONORM_CONVERGENCE: "Convergence with projected gradient 2-norm",
    Status.FUNCTION_STAGNATION: "Function stagnation",
    Status.TOO_MANY_ITERATIONS: "Too many iterations",
    Status.TOO_MANY_EVALUATIONS: "Too many function evaluations",
}


@dataclass
class SPGInfo:
    """
    State of an SPG run.

    Attributes:
        f: Function value at the current (or final) iterate.
        fbest: Best function value so far.
        pginfn: Infinite norm of the projected gradient at the current iterate.
        pgtwon: Euclidean norm of the projected gradient at the current iterate.
        iter: Number of iterations.
        fcnt: Number of function (and gradient) evaluations.
        pcnt: Number of projections.
        status: Termination status, ``Status.SEARCHING`` while running.
    """

    f: float = 0.0
    fbest: float = 0.0
    pginfn: float = 0.0
    pgtwon: float = 0.0
    iter: int = 0
    fcnt: int = 0
    pcnt: int = 0
    status: Status = Status.SEARCHING

    def reset(self) -> None:
        """Restore the initial (all zero, searching) state."""
        self.f = 0.0
        self.fbest = 0.0
        self.pginfn = 0.0
        self.pgtwon = 0.0
        self.iter = 0
        self.fcnt = 0
        self.pcnt = 0
        self.status = Status.SEARCHING

    @property
    def reason(self) -> str:
        return get_reason(self)


def get_reason(info: Union[SPGInfo, Status, int]) -> str:
    """Return a human-readable explanation of a termination status."""
    status = info.status if isinstance(info, SPGInfo) else info
    try:
        return REASON[Status(status)]
    except ValueError:
        return "unknown status"


Printer = Callable[[IO[str], SPGInfo], None]


@dataclass(frozen=True)
class SPGOptions:
    """
    Tunable parameters of the SPG solver.

    Attributes:
        eps1: Stop when the infinite norm of the projected gradient is at
            most ``eps1``.
        eps2: Stop when the Euclidean norm of the projected gradient is at
            most ``eps2``.
        eps3: Stop when the relative change of the function value over one
            iteration, ``|f - f0| / max(|f|, |f0|)``, is below ``eps3``.
        eta: Gradient scaling. The projected gradient is computed as
            ``(x - prj(x - eta*g))/eta``; ``eta = 1`` gives the textbook
            definition, which does not scale with the objective.
        maxit: Maximum number of iterations (None for no limit).
        maxfc: Maximum number of function evaluations (None for no limit).
        verb: Print information at each iteration.
        printer: Called as ``printer(io, info)`` at each iteration when
            ``verb`` is true. Defaults to :func:`spgkit.optimize.default_printer`.
        io: Output stream for iteration information (standard output if None).
    """

    eps1: float = 1e-6
    eps2: float = 1e-6
    eps3: float = 1e-3
    eta: float = 1.0
    maxit: Optional[int] = None
    maxfc: Optional[int] = None
    verb: bool = False
    printer: Optional[Printer] = None
    io: Optional[IO[str]] = None

    def __post_init__(self) -> None:
        """Validate SPGOptions invariants."""
        if not self.eps1 >= 0:
            raise ValueError(f"eps1 must be non-negative, got {self.eps1}.")
        if not self.eps2 >= 0:
            raise ValueError(f"eps2 must be non-negative, got {self.eps2}.")
        if not self.eps3 >= 0:
            raise ValueError(f"eps3 must be non-negative, got {self.eps3}.")
        if not self.eta > 0:
            raise ValueError(f"eta must be positive, got {self.eta}.")
        if self.maxit is not None and self.maxit < 0:
            raise ValueError(f"maxit must be >= 0, got {self.maxit}.")
        if self.maxfc is not None and self.maxfc < 1:
            raise ValueError(f"maxfc must be >= 1, got {self.maxfc}.")


@dataclass
class SPGResult:
    """Best point found by an SPG run together with the final solver state."""

    x: Vector
    info: SPGInfo

    @property
    def fun(self) -> float:
        return self.info.fbest

    @property
    def status(self) -> Status:
        return self.info.status

    @property
    def success(self) -> bool:
        return self.info.status > 0

    @property
    def message(self) -> str:
        return get_reason(self.info)


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
    "LAMBDA_MIN",
    "LAMBDA_MAX",
    "FTOL",
    "AMIN",
    "AMAX",
]
