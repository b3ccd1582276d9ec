"""Evaluation of candidates through a problem.

This module provides evaluate_population, which lifts the problem's
per-individual evaluate function to a whole population slice and caches the
objective values on each candidate.
"""

import logging
import math
from collections.abc import Sequence

import numpy as np

from nsga_duo.population import Candidate
from nsga_duo.protocols import Problem

logger = logging.getLogger(__name__)


def evaluate_population(problem: Problem, candidates: Sequence[Candidate], n_vars: int) -> int:
    """Evaluate every candidate once and store its objective values.

    Candidates are evaluated in list order. Re-evaluating a candidate
    overwrites its previous objective values. The problem receives a copy of
    the decision vector, so it cannot alter engine state.

    Args:
        problem: Problem providing the evaluate function.
        candidates: Candidates to evaluate, modified in place.
        n_vars: Expected decision vector length.

    Returns:
        Number of evaluate calls performed.

    Raises:
        ValueError: If a decision vector has the wrong length or the problem
            does not return exactly two objective values.

    Example:
        >>> pop = [Candidate(x=np.array([0.0, 0.0]))]
        >>> evaluate_population(ZDT1(n_vars=2), pop, n_vars=2)
        1
        >>> pop[0].f1, pop[0].f2
        (0.0, 1.0)
    """
    non_finite = 0

    for i, candidate in enumerate(candidates):
        if candidate.n_vars != n_vars:
            raise ValueError(f"candidate {i} has {candidate.n_vars} decision variables, expected {n_vars}")

        result = problem.evaluate(candidate.x.copy())
        values = np.asarray(result, dtype=np.float64).ravel()
        if values.shape[0] != 2:
            raise ValueError(
                f"evaluate must return exactly 2 objective values, got {values.shape[0]} for candidate {i}"
            )

        candidate.f1 = float(values[0])
        candidate.f2 = float(values[1])

        if not (math.isfinite(candidate.f1) and math.isfinite(candidate.f2)):
            non_finite += 1

    if non_finite:
        logger.warning("%d of %d candidates have non-finite objective values", non_finite, len(candidates))
    logger.debug("Evaluated %d candidates", len(candidates))

    return len(candidates)
