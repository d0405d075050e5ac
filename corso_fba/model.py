"""Stoichiometric model container.

A model is the usual constraint-based description of a metabolic network:

  S v = b,   lb <= v <= ub,   objective c^T v

Shapes:
  S:  (n_mets, n_rxns), stored as scipy.sparse CSC
  lb, ub, c: (n_rxns,)
  b:  (n_mets,)

Instances are immutable. Bound changes return a new model, so a caller's
model is never modified by the flux computations in this package.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Sequence

import numpy as np
import scipy.sparse as sp
from numpy.typing import NDArray

from .utils import as_float_vector


_BOUND_MODES = {
    "fixed": "fixed",
    "b": "fixed",
    "lower": "lower",
    "l": "lower",
    "upper": "upper",
    "u": "upper",
}


@dataclass(frozen=True, eq=False)
class StoichiometricModel:
    metabolites: Sequence[str]
    reactions: Sequence[str]
    S: sp.spmatrix
    lb: NDArray[np.float64]
    ub: NDArray[np.float64]
    c: NDArray[np.float64]
    b: NDArray[np.float64] | None = None
    _index: dict = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        mets = tuple(str(m) for m in self.metabolites)
        rxns = tuple(str(r) for r in self.reactions)
        if len(set(mets)) != len(mets):
            raise ValueError("metabolite names must be unique")
        if len(set(rxns)) != len(rxns):
            raise ValueError("reaction names must be unique")

        S = sp.csc_matrix(self.S, dtype=float)
        if S.shape != (len(mets), len(rxns)):
            raise ValueError(
                f"S has shape {S.shape} but model has {len(mets)} metabolites "
                f"and {len(rxns)} reactions"
            )

        n = len(rxns)
        lb = as_float_vector(self.lb, n, "lb")
        ub = as_float_vector(self.ub, n, "ub")
        c = as_float_vector(self.c, n, "c")
        b = np.zeros(len(mets)) if self.b is None else as_float_vector(self.b, len(mets), "b")

        bad = np.flatnonzero(lb > ub)
        if bad.size:
            names = ", ".join(rxns[i] for i in bad[:5])
            raise ValueError(f"lb > ub for reactions: {names}")

        object.__setattr__(self, "metabolites", mets)
        object.__setattr__(self, "reactions", rxns)
        object.__setattr__(self, "S", S)
        object.__setattr__(self, "lb", lb)
        object.__setattr__(self, "ub", ub)
        object.__setattr__(self, "c", c)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "_index", {r: i for i, r in enumerate(rxns)})

    @property
    def n_mets(self) -> int:
        return len(self.metabolites)

    @property
    def n_rxns(self) -> int:
        return len(self.reactions)

    @property
    def objective_indices(self) -> NDArray[np.int64]:
        """Indices of reactions with a nonzero objective coefficient."""
        return np.flatnonzero(self.c)

    def reaction_index(self, name: str) -> int | None:
        """Index of reaction `name`, or None if the model has no such reaction."""
        return self._index.get(name)

    def with_reaction_bounds(self, name: str, value: float, mode: str = "fixed") -> StoichiometricModel:
        """Return a copy with the bounds of reaction `name` changed.

        mode:
          "fixed" ("b"): lb = ub = value
          "lower" ("l"): lb = value
          "upper" ("u"): ub = value
        """
        idx = self.reaction_index(name)
        if idx is None:
            raise KeyError(f"reaction not in model: {name}")
        try:
            kind = _BOUND_MODES[mode]
        except KeyError:
            raise ValueError(f"unknown bound mode: {mode!r}") from None

        lb = self.lb.copy()
        ub = self.ub.copy()
        if kind in ("fixed", "lower"):
            lb[idx] = value
        if kind in ("fixed", "upper"):
            ub[idx] = value
        return replace(self, lb=lb, ub=ub)
