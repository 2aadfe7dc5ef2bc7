"""Analysis tools for sampler output over finite domains.

This module provides utilities for checking the output of the samplers
in the pyrandvar.samplers module against their target densities:

- Running visit counts to each value of a domain
- Empirical frequencies of each value
- Chi-squared goodness of fit against a density
"""

from .frequencies import count_visits, empirical_frequencies, goodness_of_fit

__all__ = [
    "count_visits",
    "empirical_frequencies",
    "goodness_of_fit",
]
