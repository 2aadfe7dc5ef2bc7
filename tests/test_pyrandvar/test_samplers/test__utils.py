"""Test sampler utilities."""

import math

import numpy as np
import pytest

from pyrandvar.exceptions import InputError
from pyrandvar.samplers._utils import (
    AcceptanceTally,
    check_count,
    density_ratio,
    has_mass,
)


def test_acceptance_tally():
    """Test the tally counts proposals and acceptances."""

    tally = AcceptanceTally()
    assert tally.acceptance_rate == 0.0

    for accepted in [True, False, True, True]:
        tally.update(accepted)

    assert tally.n_proposed == 4
    assert tally.n_accepted == 3
    assert tally.acceptance_rate == 0.75


def test_acceptance_tally_invalid():
    """Test a tally cannot accept more than it proposed."""

    with pytest.raises(ValueError):
        AcceptanceTally(n_proposed=1, n_accepted=2)


@pytest.mark.parametrize(
    "weight, expected",
    [(1.0, True), (1e-300, True), (0.0, False), (-1.0, False), (math.nan, False), (math.inf, False)],
)
def test_has_mass(weight, expected):
    """Test only finite positive weights carry mass."""

    assert has_mass(weight) is expected


def test_density_ratio():
    """Test the ratio and its handling of a current density without mass."""

    assert density_ratio(1.0, 4.0) == 0.25
    assert density_ratio(1.0, 0.0) == math.inf
    assert density_ratio(1.0, math.nan) == math.inf
    assert density_ratio(0.0, 0.0) == 0.0
    assert density_ratio(math.nan, 0.0) == 0.0


def test_check_count():
    """Test counts must be integers no smaller than the minimum."""

    check_count(0, "k", minimum=0)
    check_count(np.int64(3), "k", minimum=1)

    for k in [-1, 0.5, True, None]:
        with pytest.raises(InputError, match="k must be"):
            check_count(k, "k", minimum=0)
