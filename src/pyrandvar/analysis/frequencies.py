"""Module to count visits to the values of a finite domain."""

from collections.abc import Iterable
from typing import Any

import numpy as np
from scipy import stats

from ..domains import Finite
from ..exceptions import InputError
from ..utils.types import Density, FloatArray, IntArray


def count_visits(samples: Iterable[Any], domain: Finite) -> IntArray:
    """Count the running total number of visits to each value of a domain.

    Parameters
    ----------
    samples : Iterable
        Sequence of values of the domain, e.g. the output of `Method.draw`.
    domain : Finite
        Domain the samples were drawn from.

    Returns
    -------
    counts : IntArray
        An array of shape (n_samples, len(domain)) containing the counts of
        visits to each value (in traversal order) after each sample.

    Raises
    ------
    InputError
        If a sample is not a value of the domain.
    """
    positions = _positions(samples, domain)
    counts = np.zeros((positions.shape[0], len(domain)), dtype=int)
    for position in range(len(domain)):
        counts[:, position] = (positions == position).astype(int).cumsum()
    return counts


def empirical_frequencies(samples: Iterable[Any], domain: Finite) -> FloatArray:
    """Fraction of samples equal to each value of a domain, in traversal order.

    Parameters
    ----------
    samples : Iterable
        Sequence of values of the domain.
    domain : Finite
        Domain the samples were drawn from.

    Returns
    -------
    FloatArray
        Array of shape (len(domain),) summing to one.
    """
    positions = _positions(samples, domain)
    if positions.size == 0:
        raise InputError("Cannot compute frequencies of an empty sample.")
    return np.bincount(positions, minlength=len(domain)) / positions.size


def target_probabilities(pdf: Density, domain: Finite) -> FloatArray:
    """Normalised probabilities of pdf over a domain, in traversal order."""
    weights = np.array([pdf(x) for x in domain.traverse()], dtype=float)
    weights = np.where(np.isnan(weights), 0.0, weights)
    total = weights.sum()
    if not np.isfinite(total) or total <= 0.0:
        raise InputError(f"Density has no finite positive mass over {domain!r}")
    return weights / total


def goodness_of_fit(samples: Iterable[Any], domain: Finite, pdf: Density):
    """Chi-squared test of samples against the distribution proportional to pdf.

    Values with zero target probability are excluded from the test.

    Parameters
    ----------
    samples : Iterable
        Sequence of values of the domain.
    domain : Finite
        Domain the samples were drawn from.
    pdf : Density
        Target weight function over the domain.

    Returns
    -------
    scipy.stats._stats_py.Power_divergenceResult
        Result with ``statistic`` and ``pvalue`` attributes.

    Raises
    ------
    InputError
        If samples is empty or hits a value of zero target probability.

    Examples
    --------
    >>> result = goodness_of_fit(draws, Modular(4), lambda x: x + 1)
    >>> result.pvalue > 0.01
    """
    positions = _positions(samples, domain)
    if positions.size == 0:
        raise InputError("Cannot test an empty sample.")
    observed = np.bincount(positions, minlength=len(domain))
    expected = target_probabilities(pdf, domain) * positions.size

    support = expected > 0
    if np.any(observed[~support] > 0):
        raise InputError("Samples include values outside the support of pdf.")
    return stats.chisquare(observed[support], expected[support])


def _positions(samples: Iterable[Any], domain: Finite) -> IntArray:
    """Traversal positions of the samples."""
    return np.array([domain.index(x) for x in samples], dtype=int)
