"""Shared tolerances and small array helpers."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Tolerances
# =============================================================================
# Phase-1 optimum magnitudes below this are treated as a degenerate objective.
OBJECTIVE_TOL = 1e-6

# Recombined fluxes below this magnitude are reported as exactly 0.
FLUX_ZERO_TOL = 1e-8


def snap_to_zero(v: NDArray[np.float64], tol: float = FLUX_ZERO_TOL) -> NDArray[np.float64]:
    """Return a copy of v with entries |v_i| < tol set to 0."""
    v = np.array(v, dtype=float, copy=True)
    v[np.abs(v) < tol] = 0.0
    return v


def as_float_vector(values, n: int, name: str) -> NDArray[np.float64]:
    """Coerce values to a 1-D float array of length n."""
    arr = np.asarray(values, dtype=float).reshape(-1)
    if arr.shape != (n,):
        raise ValueError(f"{name} must have shape ({n},), got {arr.shape}")
    return arr
