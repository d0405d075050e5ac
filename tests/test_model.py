from __future__ import annotations

import numpy as np
import pytest
import scipy.sparse as sp

from corso_fba.model import StoichiometricModel


def test_coerces_inputs(linear):
    assert sp.issparse(linear.S)
    assert linear.S.shape == (2, 3)
    assert linear.n_mets == 2
    assert linear.n_rxns == 3
    assert linear.b.tolist() == [0.0, 0.0]
    assert linear.objective_indices.tolist() == [2]


def test_reaction_index(linear):
    assert linear.reaction_index("R_AB") == 1
    assert linear.reaction_index("missing") is None


@pytest.mark.parametrize(
    "mode, lb, ub",
    [
        ("fixed", 5.0, 5.0),
        ("b", 5.0, 5.0),
        ("lower", 5.0, 1000.0),
        ("upper", -1000.0, 5.0),
    ],
)
def test_with_reaction_bounds(linear, mode, lb, ub):
    out = linear.with_reaction_bounds("R_AB", 5.0, mode)
    assert out.lb[1] == lb
    assert out.ub[1] == ub
    # original untouched
    assert linear.lb[1] == -1000.0
    assert linear.ub[1] == 1000.0


def test_with_reaction_bounds_errors(linear):
    with pytest.raises(KeyError):
        linear.with_reaction_bounds("nope", 1.0)
    with pytest.raises(ValueError):
        linear.with_reaction_bounds("R_AB", 1.0, "both")


def test_rejects_bad_models():
    S = np.eye(2)
    with pytest.raises(ValueError, match="unique"):
        StoichiometricModel(["A", "A"], ["R1", "R2"], S, [0, 0], [1, 1], [1, 0])
    with pytest.raises(ValueError, match="unique"):
        StoichiometricModel(["A", "B"], ["R1", "R1"], S, [0, 0], [1, 1], [1, 0])
    with pytest.raises(ValueError, match="shape"):
        StoichiometricModel(["A"], ["R1", "R2"], S, [0, 0], [1, 1], [1, 0])
    with pytest.raises(ValueError, match="lb"):
        StoichiometricModel(["A", "B"], ["R1", "R2"], S, [0, 2], [1, 1], [1, 0])
    with pytest.raises(ValueError, match="c must have shape"):
        StoichiometricModel(["A", "B"], ["R1", "R2"], S, [0, 0], [1, 1], [1])
