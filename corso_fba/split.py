from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import scipy.sparse as sp
from numpy.typing import NDArray

from .model import StoichiometricModel

logger = logging.getLogger(__name__)

PSEUDOMET = "pseudomet"
SINK_REACTION = "EX_pseudomet"
ADDED_SUFFIX = "added"


@dataclass(frozen=True)
class AugmentedModel:
    """Cost-accounting model built from an original model.

    Column layout (n original reactions, k reversible ones):
      [0, n)       original reactions, forward only (lb = 0)
      [n, n+k)     backward copies rho+"added" with column -S[:,rho]
      n+k          EX_pseudomet, consumes the cost pseudometabolite

    Row layout: original metabolites, then "pseudomet" whose entries are the
    cost weights of every forward and backward column.

    Net flux mapping back: v_orig[rho] = v[rho] - v[added_index[rho]]
    """

    model: StoichiometricModel
    n_original: int
    reversible: NDArray[np.int64]  # (k,) original indices, ascending
    added_index: dict[int, int]    # original index -> backward column
    sink_index: int


def reversible_reactions(model: StoichiometricModel) -> NDArray[np.int64]:
    """Indices of actively reversible reactions (lb < 0 and ub >= 0)."""
    return np.flatnonzero((model.lb < 0) & (model.ub >= 0))


def augment_model(model: StoichiometricModel, costs: NDArray[np.float64]) -> AugmentedModel:
    """Split reversible reactions and add the cost pseudometabolite.

    Parameters
    - model: original model; not modified
    - costs: normalized (2n,) cost vector, see normalize_costs()

    Returns
    - AugmentedModel whose only objective coefficient is 1 on EX_pseudomet.
      The original objective is dropped; callers enforce it through bounds.
    """
    n = model.n_rxns
    costs = np.asarray(costs, dtype=float)
    if costs.shape != (2 * n,):
        raise ValueError(f"costs must have shape ({2 * n},), got {costs.shape}")

    blocked = np.flatnonzero(model.ub < 0)
    if blocked.size:
        names = ", ".join(model.reactions[i] for i in blocked[:5])
        raise ValueError(
            f"reactions with ub < 0 cannot be split into forward/backward parts: {names}"
        )

    rev = reversible_reactions(model)
    k = rev.size
    logger.debug("Splitting %d of %d reactions", k, n)

    # [S  -S_rev  0 ]
    # [w_f w_b   -1 ]
    S_split = sp.hstack([model.S, -model.S[:, rev]], format="csc")
    weights = np.concatenate([costs[:n], costs[n + rev]])
    S_aug = sp.vstack([S_split, sp.csr_matrix(weights.reshape(1, -1))], format="csc")
    sink = np.zeros((S_aug.shape[0], 1))
    sink[-1, 0] = -1.0
    S_aug = sp.hstack([S_aug, sp.csc_matrix(sink)], format="csc")

    lb = np.zeros(n + k + 1)
    ub = np.concatenate([model.ub, -model.lb[rev], [np.inf]])
    c = np.zeros(n + k + 1)
    c[-1] = 1.0

    reactions = list(model.reactions)
    reactions += [model.reactions[i] + ADDED_SUFFIX for i in rev]
    reactions.append(SINK_REACTION)

    augmented = StoichiometricModel(
        metabolites=list(model.metabolites) + [PSEUDOMET],
        reactions=reactions,
        S=S_aug,
        lb=lb,
        ub=ub,
        c=c,
        b=np.concatenate([model.b, [0.0]]),
    )

    return AugmentedModel(
        model=augmented,
        n_original=n,
        reversible=rev,
        added_index={int(rho): n + j for j, rho in enumerate(rev)},
        sink_index=n + k,
    )
