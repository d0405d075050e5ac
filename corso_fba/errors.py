"""Exceptions raised by the CORSO flux computation."""

from __future__ import annotations


class CorsoError(Exception):
    """Base class for CORSO failures."""


class InvalidCostLength(CorsoError, ValueError):
    """Cost specification length is neither 1, n nor 2n."""

    def __init__(self, length: int, n_rxns: int):
        super().__init__(
            f"Invalid length of costs: got {length}, expected 1, {n_rxns} or {2 * n_rxns}"
        )
        self.length = length
        self.n_rxns = n_rxns


class NegativeCost(CorsoError, ValueError):
    """Cost specification contains a negative weight."""


class InvalidConstraintMode(CorsoError, ValueError):
    """constraint_mode is not 'percentage' or 'absolute'."""


class InvalidSense(CorsoError, ValueError):
    """Optimization sense is not 'max' or 'min'."""


class ObjectiveUnattainable(CorsoError):
    """Absolute objective target lies beyond the phase-1 optimum."""

    def __init__(self, target: float, optimum: float, sense: str):
        super().__init__(
            f"Objective flux not attainable: target {target:g} is beyond the "
            f"{sense} optimum {optimum:g}"
        )
        self.target = target
        self.optimum = optimum
        self.sense = sense


class SolverFailure(CorsoError, RuntimeError):
    """LP solve finished without an optimal solution."""

    def __init__(self, phase: int, status: str, message: str = ""):
        text = f"phase {phase} LP solve failed with status '{status}'"
        if message:
            text += f": {message}"
        super().__init__(text)
        self.phase = phase
        self.status = status
