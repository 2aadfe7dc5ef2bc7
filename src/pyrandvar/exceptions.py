"""Custom exceptions for pyrandvar.

This module defines the exception hierarchy for the pyrandvar package,
providing specific error types for different failure modes.
"""


class PyRandVarError(Exception):
    """Base exception class for all pyrandvar-specific errors.

    This is the root exception class from which all other pyrandvar
    exceptions inherit. It can be used to catch any pyrandvar-related
    error in a general exception handler.
    """

    pass


class InputError(PyRandVarError):
    """Raised when required inputs are missing or invalid.

    This exception is raised when:
    - A domain is constructed with a non-positive number of values
    - A sampler is given a domain lacking a capability it needs
    - Burn-in or thinning counts are outside acceptable ranges
    - Array shapes are empty or incompatible

    Parameters
    ----------
    msg : str, optional
        Human-readable error message describing the input problem.
    """

    def __init__(self, msg="Invalid or missing input parameters"):
        super().__init__(msg)


class DensityError(PyRandVarError):
    """Raised when a density cannot define a distribution over a domain.

    The inverse-transform sampler raises this when the total weight of the
    density over the enumerated domain is zero, negative, infinite or NaN.
    It signals a programming error in the supplied density rather than a
    recoverable runtime condition.

    Parameters
    ----------
    msg : str, optional
        Human-readable error message describing the density problem.
    """

    def __init__(self, msg="Density has no finite positive mass over the domain"):
        super().__init__(msg)
