"""Closed-form unnormalized densities.

Factories returning weight functions suitable for any sampler in
`pyrandvar.samplers`. None of them is normalized; samplers only need
weights proportional to the target distribution.
"""

import math
from collections.abc import Callable
from typing import Any

import numpy as np
import numpy.typing as npt


def uniform() -> Callable[[Any], float]:
    """Constant weight 1 everywhere."""

    def pdf(x: Any) -> float:
        return 1.0

    return pdf


def normal(mu: float, sigma: float) -> Callable[[float], float]:
    """Gaussian shape ``exp(-(x - mu)^2 / (2 sigma^2))``.

    Parameters
    ----------
    mu : float
        Centre of the bell.
    sigma : float
        Standard deviation. Must be positive.
    """
    if sigma <= 0:
        raise ValueError(f"sigma must be positive, got {sigma}")

    def pdf(x: float) -> float:
        return math.exp(-((float(x) - mu) ** 2) / (2.0 * sigma**2))

    return pdf


def cauchy(t: float, s: float) -> Callable[[float], float]:
    """Cauchy-like shape ``1 / (pi s (1 + (x - t) / s)^2)``.

    Note the squared term is ``(1 + (x - t) / s)``, not the textbook
    ``1 + ((x - t) / s)^2``: the weight peaks (and diverges) at ``x = t - s``.

    Parameters
    ----------
    t : float
        Location parameter.
    s : float
        Scale parameter. Must be positive.
    """
    if s <= 0:
        raise ValueError(f"scale must be positive, got {s}")

    def pdf(x: float) -> float:
        denominator = math.pi * s * (1.0 + (float(x) - t) / s) ** 2
        return math.inf if denominator == 0.0 else 1.0 / denominator

    return pdf


def multivariate_normal(mu: npt.ArrayLike, sigma: npt.ArrayLike) -> Callable[[np.ndarray], float]:
    """Multivariate Gaussian shape ``exp(-(x - mu)^T Sigma^-1 (x - mu) / 2)``.

    Parameters
    ----------
    mu : array_like
        Mean vector of shape (d,).
    sigma : array_like
        Covariance matrix of shape (d, d). Inverted once, up front.

    Raises
    ------
    ValueError
        If the shapes of mu and sigma do not agree.
    numpy.linalg.LinAlgError
        If sigma is singular.
    """
    mu = np.asarray(mu, dtype=float)
    sigma = np.asarray(sigma, dtype=float)
    if mu.ndim != 1 or sigma.shape != (mu.size, mu.size):
        raise ValueError(
            f"Covariance shape {sigma.shape} does not match mean shape {mu.shape}"
        )
    precision = np.linalg.inv(sigma)

    def pdf(xs: np.ndarray) -> float:
        diff = np.asarray(xs, dtype=float).reshape(-1) - mu
        return float(np.exp(-(diff @ precision @ diff) / 2.0))

    return pdf
