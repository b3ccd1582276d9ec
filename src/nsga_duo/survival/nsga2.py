"""NSGA-II ranking and environmental selection.

This module writes Pareto rank and crowding distance onto candidates and
implements the elitist truncation that picks the next generation from the
combined parent and offspring population.
"""

from collections.abc import Sequence

import numpy as np

from nsga_duo.population import Candidate, objectives_matrix
from nsga_duo.primitives import crowding_distance, non_dominated_sort, ranks_from_fronts


def assign_rank_and_crowding(candidates: Sequence[Candidate]) -> list[list[Candidate]]:
    """Rank candidates into Pareto fronts and compute per-front crowding.

    Every candidate's rank and crowding are reset first, then set to its
    1-based front index and its crowding distance within that front.

    Args:
        candidates: Evaluated candidates, modified in place.

    Returns:
        Fronts as lists of candidates, best front first.

    Example:
        >>> fronts = assign_rank_and_crowding(population)
        >>> all(c.rank == 1 for c in fronts[0])
        True
    """
    for c in candidates:
        c.rank = 0
        c.crowding = 0.0

    objectives = objectives_matrix(candidates)
    fronts = non_dominated_sort(objectives)
    ranks = ranks_from_fronts(fronts, len(candidates))

    result: list[list[Candidate]] = []
    for front in fronts:
        cd = crowding_distance(objectives[front])
        members = []
        for idx, dist in zip(front, cd, strict=True):
            candidate = candidates[idx]
            candidate.rank = int(ranks[idx])
            candidate.crowding = float(dist)
            members.append(candidate)
        result.append(members)

    return result


def environmental_selection(candidates: Sequence[Candidate], n_survivors: int) -> list[Candidate]:
    """Select survivors front by front, cutting the overflowing front by crowding.

    Fronts are visited in ascending rank order. Each front is collected in
    population order and appended whole while it fits. The first front that
    does not fit is sorted by crowding distance descending (stable, so ties
    keep population order) and only its first remaining members are kept.

    Args:
        candidates: Combined population with rank and crowding assigned.
        n_survivors: Target size of the next generation.

    Returns:
        At most n_survivors candidates; exactly n_survivors when the input is
        at least that large.

    Raises:
        ValueError: If n_survivors is negative.

    Example:
        >>> survivors = environmental_selection(combined, n_survivors=100)
        >>> len(survivors)
        100
    """
    if n_survivors < 0:
        raise ValueError(f"n_survivors must be non-negative, got {n_survivors}")

    ranks = np.array([c.rank for c in candidates], dtype=np.int64)
    selected: list[Candidate] = []

    for rank in np.unique(ranks):
        if len(selected) >= n_survivors:
            break

        group = [candidates[i] for i in np.flatnonzero(ranks == rank)]

        if len(selected) + len(group) <= n_survivors:
            selected.extend(group)
        else:
            remaining = n_survivors - len(selected)
            cd = np.array([c.crowding for c in group], dtype=np.float64)
            order = np.argsort(-cd, kind="stable")
            selected.extend(group[i] for i in order[:remaining])
            break

    return selected
