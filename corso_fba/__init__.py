"""CORSO: cost-optimal flux distributions at sub-optimal objective values.

Core contract:
- input: a StoichiometricModel with a single objective reaction
- workflow: optimize objective -> fix it -> split reversible reactions ->
  minimize weighted total flux -> recombine net fluxes

Schultz & Qutub (2015), BMC Systems Biology 9:18.
"""

from .model import StoichiometricModel
from .solver import LPSolution, solve_lp
from .costs import normalize_costs
from .split import AugmentedModel, augment_model, reversible_reactions
from .projection import FluxResult
from .corso import compute_corso_flux
from .errors import (
    CorsoError,
    InvalidConstraintMode,
    InvalidCostLength,
    InvalidSense,
    NegativeCost,
    ObjectiveUnattainable,
    SolverFailure,
)

__version__ = "0.1.0"
