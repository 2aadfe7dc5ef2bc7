"""pyrandvar: A Python library for sampling from unnormalized densities.

pyrandvar draws samples from a distribution given only a non-negative,
possibly unnormalized weight function over a domain. The package provides:

- Domains: quantized floats, modular integers, fixed-width integers,
  continuous unit floats and fixed-shape vectors of any of them
- Exact inverse transform sampling over finite domains
- Slice, Metropolis and Gibbs Markov chain samplers
- Burn-in and thinning adapters for any sampler
- Closed-form example densities and empirical analysis tools

Examples
--------
Exact sampling over a quantized interval:

    >>> from pyrandvar.densities import normal
    >>> from pyrandvar.domains import Quantized
    >>> from pyrandvar.samplers import InverseTransform
    >>> sampler = InverseTransform(Quantized(256), seed=0)
    >>> draws = sampler.draw(normal(0.5, 0.2), 1000)

Gibbs sampling a two-dimensional vector, one coordinate at a time:

    >>> from pyrandvar.densities import multivariate_normal
    >>> gibbs = InverseTransform(Quantized(256)).gibbs(2, burn_in=100)
    >>> pdf = multivariate_normal([0.5, 0.5], [[0.01, 0.006], [0.006, 0.02]])
    >>> draws = gibbs.draw(pdf, 1000)
"""

__version__ = "0.1.0"
