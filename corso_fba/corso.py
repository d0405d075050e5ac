"""CORSO flux computation (cost-optimal fluxes at a fixed objective value).

Two LP phases:

1) optimize the model objective in the requested sense;
2) fix the objective reaction(s) to a target derived from that optimum and
   minimize the total weighted flux on the split, cost-accounting model.

The phase-2 solution is mapped back to net fluxes of the original reactions.

Reference: Schultz, A. & Qutub, A. A. (2015). Predicting internal cell
fluxes at sub-optimal growth. BMC Systems Biology 9, 18.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from .costs import normalize_costs
from .errors import InvalidConstraintMode, ObjectiveUnattainable, SolverFailure
from .model import StoichiometricModel
from .projection import FluxResult, degenerate_result, project_fluxes
from .solver import LPSolution, check_sense, solve_lp
from .split import AugmentedModel, augment_model
from .utils import FLUX_ZERO_TOL, OBJECTIVE_TOL

logger = logging.getLogger(__name__)

Solver = Callable[[StoichiometricModel, str], LPSolution]

_MODES = {
    "percentage": "percentage",
    "perc": "percentage",
    "absolute": "absolute",
    "val": "absolute",
}


def constraint_mode_of(constraint_mode: str) -> str:
    try:
        return _MODES[constraint_mode]
    except (KeyError, TypeError):
        raise InvalidConstraintMode(
            f"Invalid constraint option {constraint_mode!r}; use 'percentage' or 'absolute'"
        ) from None


def objective_targets(
    phase1: LPSolution,
    objective: NDArray[np.int64],
    sense: str,
    constraint: float,
    constraint_mode: str,
) -> NDArray[np.float64]:
    """Value each objective reaction is fixed to during cost minimization.

    percentage: x_j * |constraint| / 100 for each objective reaction j
    absolute:   constraint, provided it does not go beyond the phase-1 optimum
    """
    mode = constraint_mode_of(constraint_mode)
    if mode == "percentage":
        return phase1.x[objective] * (abs(constraint) / 100.0)

    if (sense == "max" and phase1.f < constraint) or (sense == "min" and phase1.f > constraint):
        raise ObjectiveUnattainable(float(constraint), phase1.f, sense)
    return np.full(objective.size, float(constraint))


def fix_objective(
    aug: AugmentedModel,
    objective: NDArray[np.int64],
    targets: NDArray[np.float64],
) -> AugmentedModel:
    """Pin each objective reaction to its target and block its backward copy."""
    model = aug.model
    for rho, value in zip(objective, targets):
        model = model.with_reaction_bounds(model.reactions[rho], float(value), "fixed")
        col = aug.added_index.get(int(rho))
        if col is not None:
            model = model.with_reaction_bounds(model.reactions[col], 0.0, "fixed")
    return replace(aug, model=model)


def compute_corso_flux(
    model: StoichiometricModel,
    sense: str = "max",
    constraint: float = 100.0,
    constraint_mode: str = "percentage",
    costs=1.0,
    *,
    solver: Solver = solve_lp,
    legacy_unit_cost_on_singleton: bool = True,
    objective_tol: float = OBJECTIVE_TOL,
    zero_tol: float = FLUX_ZERO_TOL,
) -> FluxResult:
    """Minimize total weighted flux at a fixed (possibly sub-optimal) objective.

    Args:
        model: original model; never modified
        sense: 'max' or 'min' for the phase-1 objective
        constraint: percentage of the optimum, or an absolute objective flux
        constraint_mode: 'percentage' ('perc') or 'absolute' ('val')
        costs: scalar, n or 2n per-direction reaction costs
        solver: callable (model, sense) -> LPSolution
        legacy_unit_cost_on_singleton: a scalar cost means unit cost (see
            normalize_costs)
        objective_tol: phase-1 optima below this magnitude give a degenerate
            all-zero result
        zero_tol: recombined fluxes below this magnitude are reported as 0

    Returns:
        FluxResult with x of length model.n_rxns.

    Raises:
        InvalidSense, InvalidConstraintMode, InvalidCostLength, NegativeCost:
            malformed inputs, before any LP is solved
        ValueError: a reaction with ub < 0 in a model whose phase-1 optimum
            is not degenerate
        ObjectiveUnattainable: absolute target beyond the phase-1 optimum
        SolverFailure: unbounded/failed phase 1, or any non-optimal phase 2
    """
    check_sense(sense)
    mode = constraint_mode_of(constraint_mode)
    objective = model.objective_indices
    if objective.size > 1:
        logger.warning(
            "Model has %d objective reactions; each is fixed to its own target", objective.size
        )

    weights = normalize_costs(
        costs, model.n_rxns, legacy_unit_cost_on_singleton=legacy_unit_cost_on_singleton
    )

    logger.info("Phase 1: %s objective", sense)
    phase1 = solver(model, sense)
    if phase1.status == "infeasible" or (phase1.optimal and abs(phase1.f) < objective_tol):
        logger.warning("Objective is infeasible or zero (status=%s); returning zero flux", phase1.status)
        return degenerate_result(model.reactions)
    if not phase1.optimal:
        raise SolverFailure(1, phase1.status, phase1.message)

    targets = objective_targets(phase1, objective, sense, constraint, mode)
    logger.info("Phase 1 optimum %.6g; fixing objective to %.6g (%s)", phase1.f, targets[0], mode)

    aug = augment_model(model, weights)
    logger.debug(
        "Augmented model: %d metabolites x %d reactions (%d split)",
        aug.model.n_mets,
        aug.model.n_rxns,
        aug.reversible.size,
    )

    aug = fix_objective(aug, objective, targets)
    phase2 = solver(aug.model, "min")
    if not phase2.optimal:
        raise SolverFailure(2, phase2.status, phase2.message)
    logger.info("Phase 2: minimized total cost %.6g", phase2.f)

    return project_fluxes(
        phase2.x,
        aug,
        model.reactions,
        y=phase1.y,
        f=targets[0],
        zero_tol=zero_tol,
    )
