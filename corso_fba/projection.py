"""Map cost-minimization solutions back to the original reaction space."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from .split import AugmentedModel
from .utils import FLUX_ZERO_TOL, snap_to_zero


@dataclass(frozen=True, eq=False)
class FluxResult:
    """Outcome of a CORSO flux computation.

    x: net flux per original reaction
    y: duals of the phase-1 solve (None if unavailable)
    f: objective value the model was fixed to in phase 2 (None if degenerate)
    fm: minimized total weighted cost (None if degenerate)
    """

    reactions: tuple[str, ...]
    x: NDArray[np.float64]
    y: NDArray[np.float64] | None = None
    f: float | None = None
    fm: float | None = None
    degenerate: bool = False

    def to_dict(self) -> dict[str, float]:
        return {r: float(v) for r, v in zip(self.reactions, self.x)}


def recombine(v: NDArray[np.float64], aug: AugmentedModel) -> NDArray[np.float64]:
    """Net flux v[rho] - v[rho+'added'] for every original reaction."""
    n = aug.n_original
    v = np.asarray(v, dtype=float)
    x = v[:n].copy()
    for rho, col in aug.added_index.items():
        x[rho] -= v[col]
    return x


def project_fluxes(
    v: NDArray[np.float64],
    aug: AugmentedModel,
    reactions,
    *,
    y: NDArray[np.float64] | None,
    f: float,
    zero_tol: float = FLUX_ZERO_TOL,
) -> FluxResult:
    """Net fluxes of the original reactions; fm is the flux through the cost sink."""
    v = np.asarray(v, dtype=float)
    fm = float(v[aug.sink_index])
    x = snap_to_zero(recombine(v, aug), tol=zero_tol)
    x.setflags(write=False)
    return FluxResult(reactions=tuple(reactions), x=x, y=y, f=float(f), fm=fm)


def degenerate_result(reactions) -> FluxResult:
    """All-zero flux with no objective value."""
    x = np.zeros(len(reactions))
    x.setflags(write=False)
    return FluxResult(reactions=tuple(reactions), x=x, degenerate=True)
