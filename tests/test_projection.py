from __future__ import annotations

import numpy as np
import pytest

from corso_fba.costs import normalize_costs
from corso_fba.projection import degenerate_result, project_fluxes, recombine
from corso_fba.split import augment_model


def test_recombine_net_flux(parallel):
    aug = augment_model(parallel, normalize_costs(1.0, parallel.n_rxns))
    # EX_A, R1, R2, EX_B, R2added, EX_pseudomet
    v = np.array([10.0, 0.0, 0.0, 10.0, 10.0, 20.0])
    assert recombine(v, aug).tolist() == [10.0, 0.0, -10.0, 10.0]


def test_project_snaps_noise_and_keeps_length(parallel):
    aug = augment_model(parallel, normalize_costs(1.0, parallel.n_rxns))
    v = np.array([10.0, 5e-9, 3.0, 10.0, 3.0 + 1e-9, 20.0])
    res = project_fluxes(v, aug, parallel.reactions, y=None, f=10.0)

    assert res.x.shape == (parallel.n_rxns,)
    assert res.x[1] == 0.0
    assert res.x[2] == 0.0
    assert res.f == 10.0 and res.fm == 20.0
    assert not res.degenerate
    assert res.to_dict()["EX_B"] == pytest.approx(10.0)
    with pytest.raises(ValueError):
        res.x[0] = 1.0


def test_degenerate_result():
    res = degenerate_result(["R1", "R2", "R3"])
    assert res.degenerate
    assert res.f is None and res.fm is None
    assert res.x.tolist() == [0.0, 0.0, 0.0]
