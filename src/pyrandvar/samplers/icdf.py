"""Inverse Transform Sampling over finite domains."""

import logging
from collections.abc import Iterator
from typing import Any

import numpy as np

from ..domains import Finite
from ..exceptions import DensityError, InputError
from ..utils.types import Density, FloatArray
from .base import Method

logger = logging.getLogger(__name__)


class InverseTransform(Method):
    """Exact sampler inverting the cumulative distribution of a finite domain.

    Every call to `sample` enumerates the whole domain once, evaluates the
    density at each value and keeps the running sum as an implicit CDF.
    Each pull then inverts the CDF with a binary search, so draws are
    i.i.d. and exact: no burn-in or thinning is needed.

    Parameters
    ----------
    domain : Finite
        Enumerable sample space.
    seed : int, optional
        Seed for the random generator. Default is None (OS entropy).

    Examples
    --------
    >>> from pyrandvar.domains import Modular
    >>> sampler = InverseTransform(Modular(2), seed=1)
    >>> draws = sampler.draw(lambda x: [1.0, 3.0][x], 1000)
    """

    def __init__(self, domain: Finite, seed: int | None = None):
        if not isinstance(domain, Finite):
            raise InputError(
                f"Inverse transform sampling needs a finite domain, got {domain!r}"
            )
        super().__init__(domain, seed)

    def sample(self, pdf: Density) -> Iterator[Any]:
        """Sample exactly from the distribution proportional to pdf.

        Parameters
        ----------
        pdf : Density
            Non-negative weight function over the domain.

        Returns
        -------
        Iterator
            Infinite iterator of i.i.d. domain values.

        Raises
        ------
        DensityError
            If any weight is negative, the running sum of weights is ever
            non-finite, or the total weight is not strictly positive.
        """
        values, cdf = self._cumulative_table(pdf)
        return self._invert(values, cdf)

    def _cumulative_table(self, pdf: Density) -> tuple[list[Any], FloatArray]:
        values = list(self.domain.traverse())
        weights = np.array([pdf(x) for x in values], dtype=float)
        if np.any(weights < 0.0):
            raise DensityError(f"Density over {self.domain!r} has negative weights")
        cdf = np.cumsum(weights)

        if not np.all(np.isfinite(cdf)):
            raise DensityError(
                f"Cumulative density over {self.domain!r} is not finite "
                "(NaN, infinite or overflowing weights)"
            )
        total = cdf[-1]
        if total <= 0.0:
            raise DensityError(
                f"Total density over {self.domain!r} must be positive, got {total}"
            )

        logger.debug(
            "Built cumulative table over %d values with total mass %g",
            len(values),
            total,
        )
        return values, cdf

    def _invert(self, values: list[Any], cdf: FloatArray) -> Iterator[Any]:
        total = cdf[-1]
        while True:
            u = self.rng.uniform(0.0, total)
            # first index whose cumulative weight is >= u
            pos = int(np.searchsorted(cdf, u, side="left"))
            yield values[min(pos, len(values) - 1)]
