"""Crowded binary tournament selection for multi-objective optimization."""

from collections.abc import Sequence

import numpy as np

from nsga_duo.population import Candidate


def crowded_tournament(population: Sequence[Candidate], rng: np.random.Generator) -> Candidate:
    """Select one parent with a binary crowded tournament.

    Two candidates are drawn uniformly with replacement and compared by:
    1. Pareto rank (lower is better)
    2. If ranks are equal, crowding distance (higher is better for diversity)
    A full tie goes to the second candidate drawn.

    Args:
        population: Ranked population to select from.
        rng: Random number generator shared by the run.

    Returns:
        The winning candidate (not a copy).

    Raises:
        ValueError: If the population is empty.

    Example:
        >>> parent = crowded_tournament(population, rng)
    """
    if len(population) == 0:
        raise ValueError("cannot run a tournament on an empty population")

    i, j = rng.integers(0, len(population), size=2)
    a, b = population[i], population[j]

    if a.rank < b.rank:
        return a
    if b.rank < a.rank:
        return b
    return a if a.crowding > b.crowding else b
