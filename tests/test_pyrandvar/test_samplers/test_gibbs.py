"""Tests for the Gibbs sampler."""

import warnings
from collections.abc import Iterator
from itertools import islice

import numpy as np
import pytest

from pyrandvar.analysis import empirical_frequencies
from pyrandvar.analysis.frequencies import target_probabilities
from pyrandvar.densities import multivariate_normal, normal
from pyrandvar.domains import Modular, Quantized, Vector
from pyrandvar.exceptions import InputError
from pyrandvar.samplers import (
    CoordinateMetropolis,
    Gibbs,
    InverseTransform,
    Metropolis,
    Method,
    Slice,
)


class CountingMethod(Method):
    """Method returning uniform draws and counting calls to sample."""

    def __init__(self, domain, seed=None):
        super().__init__(domain, seed)
        self.calls = 0

    def sample(self, pdf) -> Iterator:
        self.calls += 1
        return self.domain.uniform(self.rng)


class EmptyMethod(Method):
    """Method whose chains never produce a value."""

    def sample(self, pdf) -> Iterator:
        return iter(())


def test_separable_marginals() -> None:
    """Test each coordinate of an independent Gaussian follows its 1-D target."""

    domain = Quantized(32)
    pdf = multivariate_normal([0.5, 0.5], np.diag([0.04, 0.04]))
    sampler = Gibbs(InverseTransform(domain, seed=1), 2, burn_in=10, seed=2)

    draws = sampler.draw(pdf, 5000)

    expected = target_probabilities(normal(0.5, 0.2), domain)
    for coordinate in range(2):
        np.testing.assert_allclose(
            empirical_frequencies(draws[:, coordinate], domain), expected, atol=0.02
        )
    assert np.mean(draws) == pytest.approx(0.5, abs=0.02)


def test_correlated_coordinates() -> None:
    """Test positive correlation in the target shows up in the draws."""

    pdf = multivariate_normal([0.5, 0.5], [[0.04, 0.03], [0.03, 0.04]])
    sampler = Gibbs(InverseTransform(Quantized(32), seed=3), 2, burn_in=50, seed=4)

    draws = sampler.draw(pdf, 3000)

    assert np.corrcoef(draws[:, 0], draws[:, 1])[0, 1] > 0.5


def test_one_sub_chain_per_coordinate() -> None:
    """Test every pull asks the sub-method for one chain per coordinate."""

    sub = CountingMethod(Modular(4), seed=0)
    sampler = Gibbs(sub, (2, 3), seed=0)

    draws = list(islice(sampler.sample(lambda xs: 1.0), 5))

    assert sub.calls == 5 * 6
    assert all(d.shape == (2, 3) for d in draws)


def test_zero_conditional_falls_back_to_uniform() -> None:
    """Test a conditional without mass is replaced by a uniform base draw."""

    domain = Vector(Modular(5), 3)
    sampler = Gibbs(InverseTransform(Modular(5)), 3, seed=8)

    draws = sampler.draw(lambda xs: 0.0, 200)

    assert all(d in domain for d in draws)
    # uniform fallback draws visit every value
    assert set(draws.ravel().tolist()) == set(range(5))


def test_empty_sub_chain_falls_back_to_uniform() -> None:
    """Test a sub-method yielding nothing is replaced by a uniform base draw."""

    sampler = Gibbs(EmptyMethod(Modular(3)), 4, seed=1)

    draws = sampler.draw(lambda xs: 1.0, 50)

    assert draws.shape == (50, 4)
    assert set(draws.ravel().tolist()) == {0, 1, 2}


def test_degenerate_boundary_density_with_exact_sub() -> None:
    """Test a joint density on boundary corners is found and never left."""

    domain = Quantized(64)
    boundary = (0.0, 63 / 64)

    def pdf(xs):
        return 1.0 if all(x in boundary for x in xs) else 0.0

    sampler = Gibbs(InverseTransform(domain, seed=5), 2, burn_in=500, seed=6)

    draws = sampler.draw(pdf, 100)

    assert set(draws.ravel().tolist()) <= set(boundary)


def test_boundary_indicator_sum_with_slice_sub() -> None:
    """Test a sweep always leaves at least one coordinate on the boundary.

    The density counts the coordinates lying on the boundary. When no other
    coordinate is on it, the conditional of the last coordinate swept is an
    indicator of the boundary values, so that coordinate must land there.
    """

    boundary = (0.0, 63 / 64)

    def pdf(xs):
        return float(sum(x in boundary for x in xs))

    sampler = Gibbs(Slice(Quantized(64), seed=7), 3, seed=8)

    draws = sampler.draw(pdf, 100)

    assert all(any(x in boundary for x in d) for d in draws)


def test_seeded_chains_repeat() -> None:
    """Test identically seeded samplers produce identical chains."""

    pdf = multivariate_normal([0.3, 0.6], np.diag([0.01, 0.02]))

    def make():
        return InverseTransform(Quantized(16), seed=9).gibbs(2, seed=10)

    np.testing.assert_array_equal(make().draw(pdf, 20), make().draw(pdf, 20))


def test_fluent_construction() -> None:
    """Test building a Gibbs sampler from its sub-method."""

    sub = InverseTransform(Modular(3), seed=1)
    sampler = sub.gibbs(4, burn_in=2, seed=1)

    assert isinstance(sampler, Gibbs)
    assert sampler.sub is sub
    assert sampler.domain == Vector(Modular(3), 4)
    assert sampler.burn_in == 2
    assert sampler.draw(lambda xs: 1.0, 7).shape == (7, 4)


def test_sub_must_be_method() -> None:
    """Test the sub-sampler must be a Method instance."""

    with pytest.raises(InputError, match="Method"):
        Gibbs(Modular(3), 2)


def test_invalid_burn_in() -> None:
    """Test a negative burn-in is rejected."""

    with pytest.raises(InputError):
        Gibbs(InverseTransform(Modular(3)), 2, burn_in=-1)


def test_degenerate_boundary_density_with_slice_sub() -> None:
    """Test corner-only mass neither stalls a slice-driven sweep nor is left.

    Conditionals without mass make the slice sub-method raise, so those
    coordinates fall back to uniform draws until a corner is reached.
    """

    boundary = (0.0, 7 / 8)

    def pdf(xs):
        return 1.0 if all(x in boundary for x in xs) else 0.0

    sampler = Gibbs(Slice(Quantized(8), seed=1), 2, burn_in=200, seed=2)

    draws = sampler.draw(pdf, 20)

    assert draws.shape == (20, 2)
    assert set(draws.ravel().tolist()) <= set(boundary)


def test_metropolis_sub_favours_heavy_value() -> None:
    """Test a single Metropolis step per coordinate moves mass to the heavy value.

    Each coordinate starts from a uniform draw and takes one step with a
    uniform proposal, so value 3 (weight 10 against 1) ends up with
    probability 1/4 * 37/40 + 3/4 * 1/4, about 0.42, instead of 1/4.
    """

    weights = np.array([1.0, 1.0, 1.0, 10.0])
    rng = np.random.default_rng(11)

    def proposal(x: int) -> int:
        return int(rng.integers(0, 4))

    sampler = Metropolis(Modular(4), proposal, seed=12).gibbs(2, seed=13)

    draws = sampler.draw(lambda xs: float(np.prod(weights[xs])), 1000)

    assert draws.shape == (1000, 2)
    assert np.mean(draws == 3) == pytest.approx(0.42, abs=0.05)


def test_metropolis_sub_warns_once_on_zero_starts() -> None:
    """Test repeated zero-density starts inside sweeps produce a single warning."""

    boundary = (0.0, 7 / 8)
    rng = np.random.default_rng(0)

    def pdf(xs):
        return 1.0 if all(x in boundary for x in xs) else 0.0

    sub = Metropolis(Quantized(8), lambda x: rng.integers(0, 8) / 8, seed=3)
    sampler = Gibbs(sub, 2, seed=4)

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("default")
        draws = sampler.draw(pdf, 30)

    assert all(d in Vector(Quantized(8), 2) for d in draws)
    assert len([w for w in caught if "no mass" in str(w.message)]) == 1


def test_draw_nothing_keeps_value_shape() -> None:
    """Test an empty draw still carries the shape of a single value."""

    gibbs = Gibbs(InverseTransform(Modular(3)), (2, 3), seed=0)
    coordinate = CoordinateMetropolis(Modular(3), initial=[0, 1])

    assert gibbs.draw(lambda xs: 1.0, 0).shape == (0, 2, 3)
    assert gibbs.every(2).draw(lambda xs: 1.0, 0).shape == (0, 2, 3)
    assert coordinate.draw(lambda xs: 1.0, 0).shape == (0, 2)
    assert InverseTransform(Modular(3)).draw(lambda x: 1.0, 0).shape == (0,)
