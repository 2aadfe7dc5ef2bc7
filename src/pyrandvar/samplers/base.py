"""Base class shared by every sampling method."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from itertools import islice
from typing import TYPE_CHECKING, Any

import numpy as np
from tqdm import tqdm

from ..domains import Domain, Vector
from ..exceptions import InputError
from ..utils.types import Density, Shape

if TYPE_CHECKING:
    from .adapters import Burn, Every
    from .gibbs import Gibbs


class Method(ABC):
    """Abstract sampling method bound to a domain.

    A method owns its random generator and whatever chain state its
    algorithm needs. Calling `sample` with a density returns a lazy,
    infinite iterator of domain values. Pulling from the iterator advances
    the method's state, so the iterator is not restartable and must not be
    shared between threads.

    Parameters
    ----------
    domain : Domain
        Sample space the method draws values from.
    seed : int, optional
        Seed for the method's random generator. If None, the generator is
        seeded from OS entropy.
    """

    def __init__(self, domain: Domain, seed: int | None = None):
        if not isinstance(domain, Domain):
            raise InputError(f"Expected a Domain, got {domain!r}")
        self.domain = domain
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def __repr__(self):
        """String representation of the method."""
        return f"{self.__class__.__name__}(domain={self.domain!r}, seed={self.seed!r})"

    @abstractmethod
    def sample(self, pdf: Density) -> Iterator[Any]:
        """Sample from the distribution proportional to pdf.

        Parameters
        ----------
        pdf : Density
            Non-negative, possibly unnormalized weight function over the
            method's domain.

        Returns
        -------
        Iterator
            Infinite iterator of domain values.
        """

    def draw(self, pdf: Density, n: int, progress: bool = False) -> np.ndarray:
        """Pull n values from a fresh `sample` iterator into an array.

        Parameters
        ----------
        pdf : Density
            Weight function over the method's domain.
        n : int
            Number of values to draw.
        progress : bool, optional
            Whether to display a progress bar. Default is False.

        Returns
        -------
        np.ndarray
            Array of shape (n,) for scalar domains, or (n, *shape) for
            vector domains.
        """
        if n < 0:
            raise InputError(f"Number of draws must be non-negative, got {n}")
        samples = islice(self.sample(pdf), n)
        drawn = list(tqdm(samples, total=n, disable=not progress))
        draws = np.array(drawn, dtype=self.domain.dtype)
        return draws.reshape((len(drawn), *self.value_shape))

    @property
    def value_shape(self) -> Shape:
        """Array shape of a single sampled value, () for scalar domains."""
        if isinstance(self.domain, Vector):
            return self.domain.shape
        return ()

    def burn(self, k: int) -> "Burn":
        """Wrap this method so the first k values of each chain are dropped."""
        from .adapters import Burn

        return Burn(self, k)

    def every(self, k: int) -> "Every":
        """Wrap this method so only every k-th value of each chain is kept."""
        from .adapters import Every

        return Every(self, k)

    def gibbs(self, shape: int | Shape, burn_in: int = 0, seed: int | None = None) -> "Gibbs":
        """Use this method as the per-coordinate engine of a Gibbs sampler."""
        from .gibbs import Gibbs

        return Gibbs(self, shape, burn_in=burn_in, seed=seed)
