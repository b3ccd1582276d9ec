"""Decision variable domains.

A problem is described by an ordered sequence of DecisionVariable objects. The
order defines the indexing contract for decision vectors: gene j of every
candidate lives in the domain of variable j.
"""

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class DecisionVariable:
    """Named, bounded real-valued decision variable.

    Attributes:
        name: Human-readable variable name (used in reports only).
        min: Lower bound (inclusive).
        max: Upper bound (inclusive).

    Example:
        >>> power = DecisionVariable("power", 50.0, 400.0)
        >>> power.clamp(500.0)
        400.0
        >>> power.span
        350.0
    """

    name: str
    min: float
    max: float

    def __post_init__(self) -> None:
        """Validate bounds.

        Raises:
            ValueError: If min > max or either bound is NaN.
        """
        if not self.min <= self.max:
            raise ValueError(f"variable '{self.name}' has invalid bounds: min={self.min} must be <= max={self.max}")
        object.__setattr__(self, "min", float(self.min))
        object.__setattr__(self, "max", float(self.max))

    @property
    def span(self) -> float:
        """Width of the domain (max - min)."""
        return self.max - self.min

    def clamp(self, value: float) -> float:
        """Bound value to [min, max].

        Args:
            value: Any real value.

        Returns:
            value if it lies inside the domain, otherwise the nearest bound.
        """
        return max(self.min, min(self.max, float(value)))


def bounds_arrays(variables: Sequence[DecisionVariable]) -> tuple[np.ndarray, np.ndarray]:
    """Return (lower, upper) bound arrays for a sequence of variables."""
    lower = np.array([v.min for v in variables], dtype=np.float64)
    upper = np.array([v.max for v in variables], dtype=np.float64)
    return lower, upper
