from __future__ import annotations

import logging

from .model import StoichiometricModel

logger = logging.getLogger(__name__)


def from_cobra_model(model) -> StoichiometricModel:
    """
    Build a StoichiometricModel from a cobra.Model.

    Reaction and metabolite order follow the cobra model; the objective is
    taken from the reactions' linear objective coefficients.
    """
    from cobra.util.array import create_stoichiometric_matrix

    S = create_stoichiometric_matrix(model, array_type="lil", dtype=float)
    reactions = model.reactions
    logger.info(
        "Converting cobra model %s: %d metabolites, %d reactions",
        model.id,
        len(model.metabolites),
        len(reactions),
    )
    return StoichiometricModel(
        metabolites=[m.id for m in model.metabolites],
        reactions=[r.id for r in reactions],
        S=S,
        lb=[r.lower_bound for r in reactions],
        ub=[r.upper_bound for r in reactions],
        c=[r.objective_coefficient for r in reactions],
    )
