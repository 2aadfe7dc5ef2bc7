"""Custom types for pyrandvar."""

from typing import Any, Protocol, TypeAlias

import numpy as np
import numpy.typing as npt

# Current numpy type annotations only specify the dtype, not the shape.
IntArray: TypeAlias = npt.NDArray[np.integer]
FloatArray: TypeAlias = npt.NDArray[np.floating]
Shape: TypeAlias = tuple[int, ...]


class Density(Protocol):
    """Protocol for (unnormalized) density functions.

    A density maps a value of some domain to a non-negative weight. It need
    not integrate or sum to one. Zero and NaN are both read as "no mass".

    Used by every sampler as the target distribution.
    """

    def __call__(self, x: Any) -> float:
        """Evaluate the weight of the distribution at x.

        Parameters
        ----------
        x : Any
            A value of the domain the sampler is bound to. For vector
            domains this is a numpy array which must not be mutated.

        Returns
        -------
        float
            Non-negative weight at x.
        """
        ...


class Proposal(Protocol):
    """Protocol for proposal kernels used by the Metropolis samplers.

    The kernel is assumed to be symmetric: no Hastings correction is
    applied to the acceptance ratio.
    """

    def __call__(self, x: Any) -> Any:
        """Propose a new value based on the current value x.

        Parameters
        ----------
        x : Any
            Current value of the chain (or of a single coordinate).

        Returns
        -------
        Any
            Proposed value in the same domain.
        """
        ...
