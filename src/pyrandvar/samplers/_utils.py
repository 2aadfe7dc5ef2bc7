"""Common functions for samplers."""

import math
from dataclasses import dataclass, field

import numpy as np

from ..exceptions import InputError


@dataclass
class AcceptanceTally:
    """Running count of proposals made and accepted by a Metropolis chain."""

    n_proposed: int = field(default=0)
    n_accepted: int = field(default=0)

    def __post_init__(self):
        """Post-initialization checks."""
        if self.n_accepted > self.n_proposed:
            raise ValueError("Accepted proposals cannot exceed total proposals.")

    def update(self, accepted: bool) -> None:
        """Record the outcome of one proposal."""
        self.n_proposed += 1
        self.n_accepted += int(accepted)

    @property
    def acceptance_rate(self) -> float:
        """Fraction of proposals accepted, 0.0 before any proposal."""
        if self.n_proposed == 0:
            return 0.0
        return self.n_accepted / self.n_proposed


def has_mass(weight: float) -> bool:
    """Whether a density value carries probability mass (positive and finite)."""
    return weight > 0.0 and math.isfinite(weight)


def density_ratio(new: float, old: float) -> float:
    """Ratio new / old used in the Metropolis acceptance test.

    A zero or NaN current density accepts any candidate with mass and
    rejects the rest, so a chain started outside the support can move in.
    """
    if has_mass(old):
        return new / old
    return math.inf if has_mass(new) else 0.0


def check_count(k: int, name: str, minimum: int) -> None:
    """Raise InputError unless k is an integer no smaller than minimum."""
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or k < minimum:
        raise InputError(f"{name} must be an integer >= {minimum}, got {k!r}")
