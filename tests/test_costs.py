from __future__ import annotations

import numpy as np
import pytest

from corso_fba.costs import normalize_costs
from corso_fba.errors import InvalidCostLength, NegativeCost


def test_scalar_is_unit_cost():
    # a single value means "uniform cost", whatever the value
    assert normalize_costs(5.0, 3).tolist() == [1.0] * 6
    assert normalize_costs([0.2], 2).tolist() == [1.0] * 4


def test_scalar_broadcast_when_legacy_disabled():
    out = normalize_costs(5.0, 3, legacy_unit_cost_on_singleton=False)
    assert out.tolist() == [5.0] * 6


def test_per_reaction_costs_are_duplicated():
    out = normalize_costs([1.0, 2.0, 3.0], 3)
    assert out.tolist() == [1.0, 2.0, 3.0, 1.0, 2.0, 3.0]


def test_per_direction_costs_used_as_is():
    costs = np.array([[1.0, 2.0, 3.0, 4.0, 5.0, 6.0]]).T  # column vector
    out = normalize_costs(costs, 3)
    assert out.tolist() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]


@pytest.mark.parametrize("length", [2, 4, 7])
def test_invalid_length(length):
    with pytest.raises(InvalidCostLength):
        normalize_costs(np.ones(length), 3)


def test_negative_costs_rejected():
    with pytest.raises(NegativeCost):
        normalize_costs([1.0, -1.0, 1.0], 3)
    with pytest.raises(NegativeCost):
        normalize_costs(-2.0, 3, legacy_unit_cost_on_singleton=False)
