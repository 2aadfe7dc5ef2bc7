"""Gibbs Sampling over fixed-shape vectors."""

import logging
from collections.abc import Iterator
from typing import Any

import numpy as np

from ..domains import Vector
from ..exceptions import DensityError, InputError
from ..utils.types import Density, Shape
from ._utils import check_count
from .adapters import burn
from .base import Method

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

_EXHAUSTED = object()


class Gibbs(Method):
    """Gibbs sampler built from any univariate method.

    The state is an array of base-domain values. Each pull performs one
    sweep over all coordinates in C order. For every coordinate, the
    sub-method is asked for a single draw from the full conditional: a
    density that substitutes the trial value into that coordinate of the
    current state and evaluates the joint density. If the sub-method
    cannot produce a value (e.g. the conditional has no mass and an exact
    sub-method rejects it), the coordinate is redrawn uniformly instead.

    Parameters
    ----------
    sub : Method
        Univariate method over the base domain, used per coordinate. Its
        `sample` is called afresh for every coordinate of every sweep.
    shape : int or tuple of int
        Number of coordinates, or shape of the state array.
    burn_in : int, optional
        Number of initial sweeps discarded by every `sample` iterator.
        Default is 0.
    seed : int, optional
        Seed for the generator used for the initial state and fallback
        draws. Default is None (OS entropy).

    Examples
    --------
    >>> from pyrandvar.domains import Quantized
    >>> from pyrandvar.samplers import InverseTransform
    >>> gibbs = InverseTransform(Quantized(64), seed=1).gibbs(2, burn_in=100)
    >>> draws = gibbs.draw(lambda xs: np.exp(-np.sum((xs - 0.5) ** 2) / 0.02), 500)
    """

    domain: Vector

    def __init__(
        self,
        sub: Method,
        shape: int | Shape,
        burn_in: int = 0,
        seed: int | None = None,
    ):
        if not isinstance(sub, Method):
            raise InputError(f"Sub-sampler must be a Method, got {sub!r}")
        check_count(burn_in, "Burn-in", minimum=0)
        super().__init__(Vector(sub.domain, shape), seed)
        self.sub = sub
        self.burn_in = burn_in
        self.state: np.ndarray | None = None

    def __repr__(self):
        """String representation of the Gibbs sampler."""
        return (
            f"Gibbs(sub={self.sub!r}, shape={self.domain.shape}, "
            f"burn_in={self.burn_in}, seed={self.seed!r})"
        )

    def sample(self, pdf: Density) -> Iterator[np.ndarray]:
        """Run a Gibbs chain targeting the joint density pdf.

        Parameters
        ----------
        pdf : Density
            Non-negative weight function over arrays of the vector domain.
            It receives a working array that is reused between calls and
            must neither keep nor mutate it.

        Returns
        -------
        Iterator
            Infinite iterator of states, one per full sweep, after burn-in.
        """
        logger.info(
            "Running Gibbs sampler over %d coordinates with %s",
            self.domain.size,
            self.sub.__class__.__name__,
        )
        self.state = self.domain.draw(self.rng)
        return burn(self._chain(pdf), self.burn_in)

    def _chain(self, pdf: Density) -> Iterator[np.ndarray]:
        while True:
            self._sweep(pdf)
            yield self.state.copy()

    def _sweep(self, pdf: Density) -> None:
        for index in np.ndindex(self.state.shape):
            self.state[index] = self._resample(pdf, index)

    def _resample(self, pdf: Density, index: tuple[int, ...]) -> Any:
        """Draw one value for a coordinate from its full conditional."""
        trial = self.state.copy()

        def conditional(x: Any) -> float:
            trial[index] = x
            return pdf(trial)

        try:
            value = next(self.sub.sample(conditional), _EXHAUSTED)
        except DensityError as e:
            logger.debug("Conditional at coordinate %s rejected: %s", index, e)
            value = _EXHAUSTED

        if value is _EXHAUSTED:
            logger.debug("Falling back to a uniform draw at coordinate %s", index)
            return self.domain.base.draw(self.rng)
        return value
