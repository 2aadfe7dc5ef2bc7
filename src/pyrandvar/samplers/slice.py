"""Slice Sampling by one-shot rejection."""

import copy
import logging
from collections.abc import Iterator
from typing import Any

from ..domains import Domain, Finite
from ..exceptions import DensityError
from ..utils.types import Density
from ._utils import check_count, has_mass
from .adapters import burn
from .base import Method

logger = logging.getLogger(__name__)


class Slice(Method):
    """Markov chain sampler using an auxiliary uniform level.

    Each step draws a level uniformly under the density at the current
    state, then scans a fresh stream of uniform domain draws and moves to
    the first candidate whose density reaches the level.

    This is a simplified slice sampler: there is no stepping-out or
    shrinking interval, the candidate scan is plain rejection over the
    whole domain. For sharply peaked densities over large domains a single
    step can take arbitrarily many density evaluations.

    Parameters
    ----------
    domain : Domain
        Sample space supporting uniform draws.
    burn_in : int, optional
        Number of initial chain states discarded by every `sample`
        iterator. Default is 0.
    seed : int, optional
        Seed for the random generator. Default is None (OS entropy).
    """

    def __init__(self, domain: Domain, burn_in: int = 0, seed: int | None = None):
        check_count(burn_in, "Burn-in", minimum=0)
        super().__init__(domain, seed)
        self.burn_in = burn_in
        self.state: Any | None = None

    def __repr__(self):
        """String representation of the slice sampler."""
        return f"Slice(domain={self.domain!r}, burn_in={self.burn_in}, seed={self.seed!r})"

    def sample(self, pdf: Density) -> Iterator[Any]:
        """Run a slice sampling chain targeting pdf.

        The chain starts from one uniform draw. States where pdf is zero or
        not finite are never yielded: the chain silently restarts from a
        fresh uniform draw instead.

        Parameters
        ----------
        pdf : Density
            Non-negative weight function over the domain.

        Returns
        -------
        Iterator
            Infinite iterator of chain states, after burn-in.

        Raises
        ------
        DensityError
            On a pull, for finite domains only, once as many consecutive
            states as the domain has values lacked mass and an exhaustive
            check finds no value with mass.
        """
        self.state = self.domain.draw(self.rng)
        return burn(self._chain(pdf), self.burn_in)

    def _chain(self, pdf: Density) -> Iterator[Any]:
        while True:
            yield copy.copy(self._step(pdf))

    def _step(self, pdf: Density) -> Any:
        misses = 0
        while True:
            if self.state is None:
                self.state = self.domain.draw(self.rng)
            height = pdf(self.state)
            if has_mass(height):
                break
            logger.debug("Density %r at %r has no mass, redrawing state", height, self.state)
            self.state = None
            misses += 1
            if isinstance(self.domain, Finite) and misses == len(self.domain):
                self._check_support(pdf)

        level = self.rng.uniform(0.0, height)
        for candidate in self.domain.uniform(self.rng):
            if pdf(candidate) >= level:
                self.state = candidate
                return candidate

    def _check_support(self, pdf: Density) -> None:
        """Raise DensityError if no value of a finite domain has mass."""
        if not any(has_mass(pdf(x)) for x in self.domain.traverse()):
            raise DensityError(f"Density has no mass anywhere over {self.domain!r}")
