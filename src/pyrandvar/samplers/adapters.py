"""Stream adapters for burn-in and thinning.

`burn` and `every` act on any iterator of samples. `Burn` and `Every` wrap
a `Method` so that every chain it produces is adapted the same way.

Thinning counts pulls of the wrapped iterator. For samplers that yield one
value per state transition this thins transitions; for
`CoordinateMetropolis`, which yields only on acceptance, it thins accepted
moves.
"""

from collections.abc import Iterable, Iterator
from itertools import islice
from typing import Any, TypeVar

from ..utils.types import Density, Shape
from ._utils import check_count
from .base import Method

T = TypeVar("T")


def burn(samples: Iterable[T], k: int) -> Iterator[T]:
    """Drop the first k elements of samples.

    Parameters
    ----------
    samples : Iterable
        Sample sequence, typically the iterator returned by `Method.sample`.
    k : int
        Number of leading elements to discard. Must be non-negative.

    Returns
    -------
    Iterator
        The remaining elements, unchanged and in order.
    """
    check_count(k, "Burn-in", minimum=0)
    return islice(samples, k, None)


def every(samples: Iterable[T], k: int) -> Iterator[T]:
    """Keep every k-th element of samples, starting from the k-th.

    Parameters
    ----------
    samples : Iterable
        Sample sequence, typically the iterator returned by `Method.sample`.
    k : int
        Thinning interval. Must be positive; 1 keeps everything.

    Returns
    -------
    Iterator
        Elements k, 2k, 3k, ... (1-based) of samples.
    """
    check_count(k, "Thinning interval", minimum=1)
    return islice(samples, k - 1, None, k)


class _Adapter(Method):
    """Method delegating to another method, sharing its domain and generator."""

    def __init__(self, method: Method, k: int):
        self.method = method
        self.k = k
        self.domain = method.domain
        self.seed = method.seed
        self.rng = method.rng

    def __repr__(self):
        """String representation of the adapter."""
        return f"{self.__class__.__name__}({self.method!r}, k={self.k})"

    @property
    def value_shape(self) -> Shape:
        return self.method.value_shape


class Burn(_Adapter):
    """Discard the first k values of every chain of the wrapped method."""

    def __init__(self, method: Method, k: int):
        check_count(k, "Burn-in", minimum=0)
        super().__init__(method, k)

    def sample(self, pdf: Density) -> Iterator[Any]:
        return burn(self.method.sample(pdf), self.k)


class Every(_Adapter):
    """Keep every k-th value of every chain of the wrapped method."""

    def __init__(self, method: Method, k: int):
        check_count(k, "Thinning interval", minimum=1)
        super().__init__(method, k)

    def sample(self, pdf: Density) -> Iterator[Any]:
        return every(self.method.sample(pdf), self.k)
