"""NSGA-II primitives for Pareto-based ranking and diversity.

This module provides the core pure functions for NSGA-II:
- dominates: scalar Pareto dominance check
- dominates_matrix: vectorized pairwise dominance
- non_dominated_sort: Deb's fast non-dominated sorting algorithm
- crowding_distance: diversity metric for solutions in a Pareto front

All functions work on objective arrays and never touch Candidate objects, so
the dominance graph built during a sort lives only for the duration of the call.
"""

import numpy as np

# Objective ranges at or below this value are treated as degenerate.
RANGE_EPSILON: float = 1e-12


def dominates(a: np.ndarray, b: np.ndarray) -> bool:
    """Check if solution a Pareto-dominates solution b (minimization).

    A solution a dominates b if and only if:
      - a[i] <= b[i] for ALL objectives (a is at least as good everywhere)
      - a[i] < b[i] for AT LEAST ONE objective (a is strictly better somewhere)

    Comparisons against NaN are false, so a solution with a NaN objective
    neither dominates nor is dominated.

    Args:
        a: Objective values for solution a. Shape (n_obj,).
        b: Objective values for solution b. Shape (n_obj,).

    Returns:
        True if a dominates b, False otherwise.

    Examples:
        >>> dominates(np.array([1.0, 2.0]), np.array([2.0, 3.0]))
        True
        >>> dominates(np.array([1.0, 3.0]), np.array([2.0, 2.0]))
        False
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return bool(np.all(a <= b) and np.any(a < b))


def dominates_matrix(objectives: np.ndarray) -> np.ndarray:
    """Compute pairwise dominance for all individuals (vectorized).

    Args:
        objectives: Objective values for all individuals. Shape (n, n_obj).

    Returns:
        Boolean array of shape (n, n) where result[i, j] = True iff
        individual i dominates individual j. The diagonal is always False.

    Examples:
        >>> objs = np.array([[1.0, 1.0], [2.0, 2.0], [1.0, 2.0]])
        >>> dom = dominates_matrix(objs)
        >>> bool(dom[0, 1])
        True
    """
    a = objectives[:, np.newaxis, :]  # (n, 1, n_obj)
    b = objectives[np.newaxis, :, :]  # (1, n, n_obj)

    all_leq = np.all(a <= b, axis=2)
    any_lt = np.any(a < b, axis=2)

    return all_leq & any_lt


def non_dominated_sort(objectives: np.ndarray) -> list[np.ndarray]:
    """Partition individuals into Pareto fronts using Deb's fast algorithm.

    The first front lists its members in population order. Every later front
    lists its members in the order they are released: walking the previous
    front in order and, for each member, the individuals it dominates in index
    order, an individual joins the next front when its domination count drops
    to zero.

    Time complexity: O(M * N^2) where M = number of objectives, N = population size.

    Args:
        objectives: Objective values for all individuals. Shape (n, n_obj).

    Returns:
        List of integer index arrays, best front first. Empty for an empty
        population.

    Examples:
        >>> objs = np.array([[1.0, 1.0], [2.0, 2.0], [3.0, 3.0]])
        >>> [front.tolist() for front in non_dominated_sort(objs)]
        [[0], [1], [2]]
    """
    n = objectives.shape[0]

    if n == 0:
        return []

    dom_matrix = dominates_matrix(objectives)

    # dominated_sets[p] = individuals p dominates; domination_count[q] = how many dominate q
    dominated_sets = [np.flatnonzero(dom_matrix[p]) for p in range(n)]
    domination_count = dom_matrix.sum(axis=0).astype(np.int64)

    fronts: list[np.ndarray] = []
    current = np.flatnonzero(domination_count == 0)

    while len(current) > 0:
        fronts.append(current)
        released: list[int] = []
        for p in current:
            for q in dominated_sets[p]:
                domination_count[q] -= 1
                if domination_count[q] == 0:
                    released.append(int(q))
        current = np.array(released, dtype=np.intp)

    return fronts


def ranks_from_fronts(fronts: list[np.ndarray], n: int) -> np.ndarray:
    """Convert a list of fronts to a 1-based rank array of shape (n,).

    Individuals that belong to no front keep rank 0.
    """
    ranks = np.zeros(n, dtype=np.int64)
    for i, front in enumerate(fronts):
        ranks[front] = i + 1
    return ranks


def crowding_distance(front_objectives: np.ndarray) -> np.ndarray:
    """Compute crowding distance for individuals in a single Pareto front.

    Crowding distance measures how isolated a solution is in objective space.
    Higher values indicate more isolated solutions (preferred for diversity).

    For each objective the front is sorted ascending (stable sort, ties keep
    front order). The lowest and highest entries receive infinite distance and
    every interior entry adds the normalized gap between its two neighbors.
    When an objective's range is at most RANGE_EPSILON its interior term is
    skipped. Contributions add up across objectives.

    A front of size 0 or 1 has no boundary to speak of: its distances stay 0.

    Args:
        front_objectives: Objective values for individuals in ONE front only.
            Shape (n_front, n_obj).

    Returns:
        Array of shape (n_front,) containing crowding distances.

    Examples:
        >>> objs = np.array([[1.0, 4.0], [2.0, 3.0], [3.0, 2.0], [4.0, 1.0]])
        >>> cd = crowding_distance(objs)
        >>> bool(np.isinf(cd[0]) and np.isinf(cd[-1]))
        True
    """
    n_front = front_objectives.shape[0]
    distances = np.zeros(n_front, dtype=np.float64)

    if n_front <= 1:
        return distances

    n_obj = front_objectives.shape[1]

    # Non-finite objectives yield inf/nan arithmetic here; it must not raise.
    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        for m in range(n_obj):
            values = front_objectives[:, m]
            sorted_indices = np.argsort(values, kind="stable")

            obj_min = values[sorted_indices[0]]
            obj_max = values[sorted_indices[-1]]
            obj_range = obj_max - obj_min

            distances[sorted_indices[0]] = np.inf
            distances[sorted_indices[-1]] = np.inf

            if obj_range > RANGE_EPSILON:
                for i in range(1, n_front - 1):
                    prev_val = values[sorted_indices[i - 1]]
                    next_val = values[sorted_indices[i + 1]]
                    distances[sorted_indices[i]] += (next_val - prev_val) / obj_range

    return distances
