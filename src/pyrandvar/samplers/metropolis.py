"""Metropolis-Hastings Sampling.

Two variants share the same acceptance rule:

- `Metropolis`: univariate chain driven by an explicit proposal kernel,
  yielding the current state on every pull
- `CoordinateMetropolis`: multivariate chain resampling one coordinate of
  an array state per pull, yielding only on acceptance

No Hastings correction is applied. Proposal kernels are assumed to be
symmetric; an asymmetric kernel biases the stationary distribution.
"""

import copy
import logging
import warnings
from collections.abc import Iterator
from typing import Any

import numpy as np
import numpy.typing as npt

from ..domains import Domain, Vector
from ..exceptions import InputError
from ..utils.types import Density, Proposal, Shape
from ._utils import AcceptanceTally, density_ratio, has_mass
from .base import Method

logger = logging.getLogger(__name__)


class Metropolis(Method):
    """Univariate Metropolis sampler with a user-supplied proposal kernel.

    Each pull proposes a candidate from the current state, and accepts it
    with probability ``min(1, pdf(candidate) / pdf(current))``. The density
    of the current state is cached, so each pull costs one evaluation.

    Parameters
    ----------
    domain : Domain
        Sample space of the chain.
    proposal : Proposal
        Symmetric kernel mapping the current value to a candidate value.
    initial : Any, optional
        Starting value of every chain. If None, each chain starts from one
        uniform draw of the domain.
    seed : int, optional
        Seed for the random generator. Default is None (OS entropy).

    Attributes
    ----------
    tally : AcceptanceTally
        Proposal and acceptance counts of the most recent chain.
    """

    def __init__(
        self,
        domain: Domain,
        proposal: Proposal,
        initial: Any | None = None,
        seed: int | None = None,
    ):
        if not callable(proposal):
            raise InputError(f"Proposal must be callable, got {proposal!r}")
        super().__init__(domain, seed)
        self.proposal = proposal
        self.initial = initial
        self.state: Any | None = None
        self.density = np.nan
        self.tally = AcceptanceTally()

    def sample(self, pdf: Density) -> Iterator[Any]:
        """Run a Metropolis chain targeting pdf.

        Parameters
        ----------
        pdf : Density
            Non-negative weight function over the domain.

        Returns
        -------
        Iterator
            Infinite iterator of chain states, one per proposal.
        """
        if self.initial is None:
            self.state = self.domain.draw(self.rng)
        else:
            self.state = copy.copy(self.initial)
        self.density = pdf(self.state)
        self.tally = AcceptanceTally()

        if not has_mass(self.density):
            logger.debug("Start %r has density %r", self.state, self.density)
            warnings.warn(
                "Metropolis chain starts where the density has no mass; "
                "the first candidate with mass will be accepted."
            )
        return self._chain(pdf)

    def _chain(self, pdf: Density) -> Iterator[Any]:
        while True:
            self._step(pdf)
            yield copy.copy(self.state)

    def _step(self, pdf: Density) -> bool:
        candidate = self.proposal(self.state)
        candidate_density = pdf(candidate)

        accept = self.rng.random() < density_ratio(candidate_density, self.density)
        self.tally.update(accept)
        if accept:
            self.state = candidate
            self.density = candidate_density

        logger.debug(
            "%s move: proposed=%r (density %r)",
            "Accepting" if accept else "Rejecting",
            candidate,
            candidate_density,
        )
        return accept


class CoordinateMetropolis(Method):
    """Multivariate Metropolis sampler updating one coordinate per pull.

    The state is a numpy array of values from a base domain. Pulls cycle
    through the coordinates in C order. For the selected coordinate a new
    value is proposed (through the kernel, or as a uniform draw of the base
    domain), substituted into a copy of the state, and accepted when a
    level drawn uniformly in ``[0, pdf(old state)]`` falls below
    ``pdf(new state)``.

    Rejected proposals produce no element: the iterator keeps proposing
    until one is accepted, so each yielded value is an accepted move.
    Thinning the iterator therefore thins accepted moves, not proposals.

    Parameters
    ----------
    domain : Domain
        Base domain of every coordinate.
    initial : array_like
        Starting state of every chain. Its shape fixes the coordinates.
    proposal : Proposal, optional
        Symmetric kernel mapping a coordinate value to a candidate value.
        If None, candidates are uniform draws from the base domain.
    seed : int, optional
        Seed for the random generator. Default is None (OS entropy).

    Attributes
    ----------
    tally : AcceptanceTally
        Proposal and acceptance counts of the most recent chain.
    """

    def __init__(
        self,
        domain: Domain,
        initial: npt.ArrayLike,
        proposal: Proposal | None = None,
        seed: int | None = None,
    ):
        super().__init__(domain, seed)
        self.initial = np.array(initial, dtype=domain.dtype)
        if self.initial.size == 0:
            raise InputError("Initial state must have at least one coordinate.")
        if proposal is not None and not callable(proposal):
            raise InputError(f"Proposal must be callable, got {proposal!r}")
        self.proposal = proposal
        self.state = self.initial.copy()
        self.position = 0
        self.tally = AcceptanceTally()

    @classmethod
    def from_shape(
        cls,
        domain: Domain,
        shape: int | Shape,
        proposal: Proposal | None = None,
        seed: int | None = None,
    ) -> "CoordinateMetropolis":
        """Build a sampler whose initial state is a uniform draw of the given shape."""
        vector = Vector(domain, shape)
        sampler = cls(domain, np.empty(vector.shape, dtype=domain.dtype), proposal, seed)
        sampler.initial = vector.draw(sampler.rng)
        return sampler

    @property
    def value_shape(self) -> Shape:
        return self.initial.shape

    def __repr__(self):
        """String representation of the coordinate sampler."""
        return (
            f"CoordinateMetropolis(domain={self.domain!r}, "
            f"shape={self.initial.shape}, seed={self.seed!r})"
        )

    def sample(self, pdf: Density) -> Iterator[np.ndarray]:
        """Run a coordinate-wise Metropolis chain targeting pdf.

        Parameters
        ----------
        pdf : Density
            Non-negative weight function over arrays shaped like the state.

        Returns
        -------
        Iterator
            Infinite iterator of states, one per accepted proposal.
        """
        self.state = self.initial.copy()
        self.position = 0
        self.tally = AcceptanceTally()
        return self._chain(pdf)

    def _chain(self, pdf: Density) -> Iterator[np.ndarray]:
        while True:
            if self._step(pdf):
                yield self.state.copy()

    def _step(self, pdf: Density) -> bool:
        index = np.unravel_index(self.position, self.state.shape)
        self.position = (self.position + 1) % self.state.size

        old_density = pdf(self.state)
        if self.proposal is None:
            proposed = self.domain.draw(self.rng)
        else:
            proposed = self.proposal(self.state[index].item())

        trial = self.state.copy()
        trial[index] = proposed
        new_density = pdf(trial)

        level = self.rng.random() * old_density if has_mass(old_density) else 0.0
        accept = level < new_density
        self.tally.update(accept)
        if accept:
            self.state = trial

        logger.debug(
            "%s coordinate %s: proposed=%r (density %r -> %r)",
            "Accepting" if accept else "Rejecting",
            index,
            proposed,
            old_density,
            new_density,
        )
        return accept
