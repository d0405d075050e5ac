"""Per-direction reaction cost vectors.

A cost specification can be
  - a single value (uniform cost),
  - n values (same cost forward and backward for each reaction),
  - 2n values (forward costs for all reactions, then backward costs).

It is normalized to the 2n form:
  [forward(0..n-1), backward(0..n-1)]
The splitter later keeps only the backward entries of reversible reactions.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidCostLength, NegativeCost


def normalize_costs(
    costs,
    n_rxns: int,
    *,
    legacy_unit_cost_on_singleton: bool = True,
) -> NDArray[np.float64]:
    """Expand a cost specification to a length-2n non-negative vector.

    Args:
        costs: scalar or sequence of length 1, n or 2n
        n_rxns: number of reactions n
        legacy_unit_cost_on_singleton: if True (default), a single value is
            read as "uniform cost" and every weight becomes 1 regardless of
            the value given. If False, the single value is broadcast.

    Returns:
        (2n,) float array
    """
    arr = np.asarray(costs, dtype=float).reshape(-1)

    if arr.size == 1:
        value = 1.0 if legacy_unit_cost_on_singleton else float(arr[0])
        arr = np.full(n_rxns, value)

    if arr.size == n_rxns:
        arr = np.concatenate([arr, arr])
    elif arr.size != 2 * n_rxns:
        raise InvalidCostLength(int(arr.size), n_rxns)

    if np.any(np.isnan(arr)):
        raise NegativeCost("costs must be non-negative numbers, got NaN")
    neg = np.flatnonzero(arr < 0)
    if neg.size:
        raise NegativeCost(f"costs must be non-negative; negative entries at positions {neg[:5].tolist()}")

    return arr
