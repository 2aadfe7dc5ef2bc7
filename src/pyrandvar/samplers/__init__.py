"""Sampling algorithms for pyrandvar.

This module provides the sampling methods, all generic over a domain:

- Inverse transform: exact i.i.d. sampling over finite domains
- Slice: Markov chain sampling via an auxiliary level and rejection
- Metropolis: Markov chain sampling with a proposal kernel, univariate or
  one coordinate at a time
- Gibbs: multivariate sampling driven by any univariate method

and the adapters (burn-in and thinning) that can wrap any of them.
"""

from .adapters import Burn, Every, burn, every
from .base import Method
from .gibbs import Gibbs
from .icdf import InverseTransform
from .metropolis import CoordinateMetropolis, Metropolis
from .slice import Slice

__all__ = [
    "Method",
    "InverseTransform",
    "Slice",
    "Metropolis",
    "CoordinateMetropolis",
    "Gibbs",
    "Burn",
    "Every",
    "burn",
    "every",
]
