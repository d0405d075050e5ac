"""Small networks shared by the tests.

linear:   EX_A: -> A  [0, 10]
          R_AB: A <-> B  [-1000, 1000]
          EX_B: B ->  [0, 1000]   (objective)

reverse:  EX_B: -> B  [0, 10]
          R_AB: A <-> B  [-1000, 1000]
          EX_A: A ->  [0, 1000]   (objective; needs R_AB < 0)

parallel: EX_A: -> A  [0, 10]
          R1:   A -> B   [0, 1000]
          R2:   B <-> A  [-1000, 1000]  (A -> B runs backward)
          EX_B: B ->  [0, 1000]   (objective)
"""

from __future__ import annotations

import numpy as np
import pytest

from corso_fba.model import StoichiometricModel


def make_linear(uptake: float = 10.0) -> StoichiometricModel:
    S = np.array([
        [1, -1,  0],
        [0,  1, -1],
    ], dtype=float)
    return StoichiometricModel(
        metabolites=["A", "B"],
        reactions=["EX_A", "R_AB", "EX_B"],
        S=S,
        lb=[0.0, -1000.0, 0.0],
        ub=[uptake, 1000.0, 1000.0],
        c=[0.0, 0.0, 1.0],
    )


def make_reverse() -> StoichiometricModel:
    S = np.array([
        [0, -1, -1],
        [1,  1,  0],
    ], dtype=float)
    return StoichiometricModel(
        metabolites=["A", "B"],
        reactions=["EX_B", "R_AB", "EX_A"],
        S=S,
        lb=[0.0, -1000.0, 0.0],
        ub=[10.0, 1000.0, 1000.0],
        c=[0.0, 0.0, 1.0],
    )


def make_parallel() -> StoichiometricModel:
    S = np.array([
        [1, -1,  1,  0],
        [0,  1, -1, -1],
    ], dtype=float)
    return StoichiometricModel(
        metabolites=["A", "B"],
        reactions=["EX_A", "R1", "R2", "EX_B"],
        S=S,
        lb=[0.0, 0.0, -1000.0, 0.0],
        ub=[10.0, 1000.0, 1000.0, 1000.0],
        c=[0.0, 0.0, 0.0, 1.0],
    )


@pytest.fixture
def linear() -> StoichiometricModel:
    return make_linear()


@pytest.fixture
def reverse() -> StoichiometricModel:
    return make_reverse()


@pytest.fixture
def parallel() -> StoichiometricModel:
    return make_parallel()
