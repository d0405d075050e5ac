"""LP solver adapter.

Solves the flux balance problem of a StoichiometricModel:

    optimize c^T v   s.t.  S v = b,  lb <= v <= ub

with scipy's HiGHS interface. linprog always minimizes, so maximization is
done on -c and the objective value and duals are flipped back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

import numpy as np
from numpy.typing import NDArray
from scipy.optimize import linprog

from .errors import InvalidSense
from .model import StoichiometricModel

logger = logging.getLogger(__name__)

LPStatus = Literal["optimal", "infeasible", "unbounded", "failed"]

# scipy.optimize.linprog status codes
_STATUS = {0: "optimal", 2: "infeasible", 3: "unbounded"}

SENSES = ("max", "min")


@dataclass(frozen=True)
class LPSolution:
    x: NDArray[np.float64] | None
    y: NDArray[np.float64] | None
    f: float | None
    status: LPStatus
    message: str = ""

    @property
    def optimal(self) -> bool:
        return self.status == "optimal"


def check_sense(sense: str) -> str:
    if sense not in SENSES:
        raise InvalidSense(f"sense must be 'max' or 'min', got {sense!r}")
    return sense


def _bounds(model: StoichiometricModel) -> list[tuple[float | None, float | None]]:
    lo = [None if np.isneginf(v) else float(v) for v in model.lb]
    hi = [None if np.isposinf(v) else float(v) for v in model.ub]
    return list(zip(lo, hi))


def solve_lp(model: StoichiometricModel, sense: str = "max") -> LPSolution:
    """Optimize model.c in the given sense ('max' or 'min').

    Returns an LPSolution; a non-optimal status is reported, not raised.
    """
    check_sense(sense)
    sign = -1.0 if sense == "max" else 1.0

    logger.debug(
        "Solving LP (%s): %d metabolites x %d reactions", sense, model.n_mets, model.n_rxns
    )
    res = linprog(
        sign * model.c,
        A_eq=model.S,
        b_eq=model.b,
        bounds=_bounds(model),
        method="highs",
    )

    status = _STATUS.get(res.status, "failed")
    if status != "optimal":
        logger.debug("LP finished with status %s: %s", status, res.message)
        return LPSolution(x=None, y=None, f=None, status=status, message=str(res.message))

    y = None
    eqlin = getattr(res, "eqlin", None)
    if eqlin is not None and getattr(eqlin, "marginals", None) is not None:
        y = sign * np.asarray(eqlin.marginals, dtype=float)

    return LPSolution(
        x=np.asarray(res.x, dtype=float),
        y=y,
        f=float(sign * res.fun),
        status="optimal",
        message=str(res.message),
    )
