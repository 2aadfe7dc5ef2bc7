"""Sample spaces that samplers are generic over.

A domain knows how to draw values from its canonical uninformed
distribution. Finite domains can additionally enumerate every value they
contain, which is what exact samplers need.

- `Quantized`: the interval [0, 1) split into equal buckets
- `Modular`: the integers {0, ..., n-1}
- `FixedWidthInteger`: every value of a numpy integer dtype
- `Unit`: continuous floats in [0, 1)
- `Vector`: fixed-shape arrays of a base domain
"""

import math
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.random import Generator

from .exceptions import InputError
from .utils.types import Shape


class Domain(ABC):
    """Abstract sample space supporting uniform draws."""

    dtype: Any = object

    @abstractmethod
    def draw(self, rng: Generator) -> Any:
        """Draw a single value uniformly from the domain using rng."""

    @abstractmethod
    def __contains__(self, x: Any) -> bool: ...

    def uniform(self, rng: Generator | None = None) -> Iterator[Any]:
        """Infinite stream of i.i.d. uniform draws from the domain.

        Parameters
        ----------
        rng : Generator, optional
            Random generator to draw from. If None, a fresh generator is
            seeded from OS entropy for this call only, so separate calls
            give statistically independent streams.

        Yields
        ------
        Any
            Values of the domain.
        """
        if rng is None:
            rng = np.random.default_rng()
        while True:
            yield self.draw(rng)


class Finite(Domain):
    """Domain whose values can be enumerated exhaustively."""

    @abstractmethod
    def traverse(self) -> Iterator[Any]:
        """Enumerate every value exactly once, in ascending order."""

    @abstractmethod
    def __len__(self) -> int: ...

    def index(self, x: Any) -> int:
        """Position of x in the traversal order."""
        for i, value in enumerate(self.traverse()):
            if value == x:
                return i
        raise InputError(f"{x!r} is not a value of {self!r}")


@dataclass(frozen=True)
class Quantized(Finite):
    """The half-open interval [0, 1) discretized into n equal buckets.

    Values are the left edges ``k / n`` of the buckets.
    """

    n: int
    dtype = float

    def __post_init__(self):
        """Post-initialization checks."""
        if not isinstance(self.n, int) or self.n <= 0:
            raise InputError(f"Number of buckets must be a positive integer, got {self.n!r}")

    def draw(self, rng: Generator) -> float:
        return math.floor(rng.random() * self.n) / self.n

    def traverse(self) -> Iterator[float]:
        return (k / self.n for k in range(self.n))

    def index(self, x: float) -> int:
        if x not in self:
            raise InputError(f"{x!r} is not a value of {self!r}")
        return round(x * self.n)

    def __len__(self) -> int:
        return self.n

    def __contains__(self, x: Any) -> bool:
        try:
            k = round(x * self.n)
        except (TypeError, ValueError, OverflowError):
            return False
        return 0 <= k < self.n and k / self.n == x


@dataclass(frozen=True)
class Modular(Finite):
    """The integers {0, ..., n-1}."""

    n: int
    dtype = int

    def __post_init__(self):
        """Post-initialization checks."""
        if not isinstance(self.n, int) or self.n <= 0:
            raise InputError(f"Modulus must be a positive integer, got {self.n!r}")

    def draw(self, rng: Generator) -> int:
        return int(rng.integers(0, self.n))

    def traverse(self) -> Iterator[int]:
        return iter(range(self.n))

    def index(self, x: int) -> int:
        if x not in self:
            raise InputError(f"{x!r} is not a value of {self!r}")
        return int(x)

    def __len__(self) -> int:
        return self.n

    def __contains__(self, x: Any) -> bool:
        return isinstance(x, (int, np.integer)) and 0 <= x < self.n


@dataclass(frozen=True)
class FixedWidthInteger(Finite):
    """Every value of a numpy integer dtype, drawn with full-range random bits.

    Traversal is only practical for 8 and 16-bit types.
    """

    dtype: Any = np.uint8

    def __post_init__(self):
        """Post-initialization checks."""
        if not np.issubdtype(self.dtype, np.integer):
            raise InputError(f"dtype must be an integer type, got {self.dtype!r}")

    @property
    def bounds(self) -> tuple[int, int]:
        """Inclusive (min, max) of the dtype."""
        info = np.iinfo(self.dtype)
        return int(info.min), int(info.max)

    def draw(self, rng: Generator) -> int:
        low, high = self.bounds
        return int(rng.integers(low, high, endpoint=True, dtype=self.dtype))

    def traverse(self) -> Iterator[int]:
        low, high = self.bounds
        return iter(range(low, high + 1))

    def index(self, x: int) -> int:
        if x not in self:
            raise InputError(f"{x!r} is not a value of {self!r}")
        return int(x) - self.bounds[0]

    def __len__(self) -> int:
        low, high = self.bounds
        return high - low + 1

    def __contains__(self, x: Any) -> bool:
        low, high = self.bounds
        return isinstance(x, (int, np.integer)) and low <= x <= high


@dataclass(frozen=True)
class Unit(Domain):
    """Continuous floats in [0, 1)."""

    dtype = float

    def draw(self, rng: Generator) -> float:
        return float(rng.random())

    def __contains__(self, x: Any) -> bool:
        return isinstance(x, (float, int, np.floating, np.integer)) and 0.0 <= x < 1.0


@dataclass(frozen=True)
class Vector(Domain):
    """Fixed-shape arrays whose entries come from a base domain.

    Uniform draws fill every entry independently. Vector domains are not
    finite: exact sampling over them is replaced by Gibbs sampling.
    """

    base: Domain
    shape: int | Shape

    def __post_init__(self):
        """Post-initialization checks."""
        if not isinstance(self.base, Domain):
            raise InputError(f"Base must be a Domain, got {self.base!r}")
        object.__setattr__(self, "shape", _as_shape(self.shape))

    @property
    def dtype(self) -> Any:
        return self.base.dtype

    @property
    def size(self) -> int:
        """Number of coordinates."""
        return math.prod(self.shape)

    def draw(self, rng: Generator) -> np.ndarray:
        values = [self.base.draw(rng) for _ in range(self.size)]
        return np.array(values, dtype=self.dtype).reshape(self.shape)

    def __contains__(self, x: Any) -> bool:
        x = np.asarray(x)
        return x.shape == self.shape and all(v.item() in self.base for v in x.flat)


def _as_shape(shape: int | Shape) -> Shape:
    """Normalise an int or tuple to a non-empty shape of positive sizes."""
    shape = (shape,) if isinstance(shape, (int, np.integer)) else tuple(shape)
    if not shape or any(int(s) <= 0 for s in shape):
        raise InputError(f"Shape must contain positive sizes, got {shape!r}")
    return tuple(int(s) for s in shape)
