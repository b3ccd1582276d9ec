"""Population data structures for NSGA-II optimization.

This module provides the core data structures for representing candidates in
the NSGA-II engine:

- Candidate: a decision vector plus its cached fitness metadata
- initialize_population: uniform random candidates inside the variable bounds
- objectives_matrix: stack the objective values of a population for the
  vectorized primitives

A population is a plain list of Candidate objects owned by the driver. The
dominance bookkeeping used while ranking is not stored on the candidates; it is
rebuilt from the objective matrix on every sort.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from nsga_duo.variables import DecisionVariable, bounds_arrays


@dataclass(eq=False)
class Candidate:
    """A single solution of the optimization problem.

    Attributes:
        x: Decision vector, shape (n_vars,).
        f1: First objective value. NaN until the candidate is evaluated.
        f2: Second objective value. NaN until the candidate is evaluated.
        rank: Pareto front index, 1 for the non-dominated front, 0 while
            unassigned.
        crowding: Crowding distance within the candidate's front. Infinite for
            boundary candidates.

    Example:
        >>> c = Candidate(x=np.array([0.5, 0.25]))
        >>> c.rank
        0
        >>> twin = c.clone()
        >>> twin.x is c.x
        False
    """

    x: np.ndarray
    f1: float = field(default=float("nan"))
    f2: float = field(default=float("nan"))
    rank: int = 0
    crowding: float = 0.0

    def __post_init__(self) -> None:
        """Coerce x to a 1D float array.

        Raises:
            ValueError: If x is not one-dimensional.
        """
        x = np.asarray(self.x, dtype=np.float64)
        if x.ndim != 1:
            raise ValueError(f"x must be 1D, got shape {x.shape}")
        self.x = x

    @property
    def n_vars(self) -> int:
        """Number of decision variables."""
        return self.x.shape[0]

    @property
    def objectives(self) -> np.ndarray:
        """Objective values as an array of shape (2,)."""
        return np.array([self.f1, self.f2], dtype=np.float64)

    def clone(self) -> "Candidate":
        """Return an independent copy with the same fitness, rank and crowding."""
        return Candidate(
            x=self.x.copy(),
            f1=self.f1,
            f2=self.f2,
            rank=self.rank,
            crowding=self.crowding,
        )


def initialize_population(
    variables: Sequence[DecisionVariable],
    pop_size: int,
    rng: np.random.Generator,
) -> list[Candidate]:
    """Create pop_size unevaluated candidates drawn uniformly inside the bounds.

    Values are drawn variable by variable for each candidate in turn, so the
    generator is consumed in a fixed order for a given seed.

    Args:
        variables: Ordered decision variables defining the bounds.
        pop_size: Number of candidates to create.
        rng: Random number generator shared by the whole run.

    Returns:
        List of pop_size candidates with rank 0 and NaN objectives.
    """
    lower, upper = bounds_arrays(variables)
    return [Candidate(x=rng.uniform(lower, upper)) for _ in range(pop_size)]


def objectives_matrix(candidates: Sequence[Candidate]) -> np.ndarray:
    """Stack (f1, f2) of all candidates into an array of shape (n, 2)."""
    if len(candidates) == 0:
        return np.empty((0, 2), dtype=np.float64)
    return np.array([(c.f1, c.f2) for c in candidates], dtype=np.float64)
