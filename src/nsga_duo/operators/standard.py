"""Standard genetic operators for NSGA-II.

This module provides the real-coded variation operators used by the engine:

- SBX (Simulated Binary Crossover): a crossover operator that simulates
  single-point crossover behavior for real-valued variables
- Polynomial Mutation: a bounded mutation operator with controllable spread

Both operators modify decision vectors in place, draw from the run's shared
generator, and clamp every written gene to its variable's bounds.
"""

from collections.abc import Sequence

import numpy as np

from nsga_duo.primitives import RANGE_EPSILON
from nsga_duo.variables import DecisionVariable

SBX_ETA: float = 15.0
PM_ETA: float = 20.0


def _check_length(x: np.ndarray, variables: Sequence[DecisionVariable], label: str) -> None:
    if x.shape[0] != len(variables):
        raise ValueError(f"{label} has {x.shape[0]} genes, expected {len(variables)} to match the variables")


def sbx_crossover(
    x1: np.ndarray,
    x2: np.ndarray,
    variables: Sequence[DecisionVariable],
    rng: np.random.Generator,
    eta: float = SBX_ETA,
) -> None:
    """Apply Simulated Binary Crossover to two decision vectors in place.

    Each gene is crossed independently with probability 0.5. A crossed gene
    draws a spread factor beta from the SBX distribution and is replaced by
    the two symmetric children around the parents' values, clamped to the
    gene's bounds.

    Args:
        x1: First decision vector, shape (n_vars,). Modified in place.
        x2: Second decision vector, shape (n_vars,). Modified in place.
        variables: Variable domains used for clamping.
        rng: Random number generator shared by the run.
        eta: Distribution index (default 15.0). Higher values produce children
            closer to the parents.

    Raises:
        ValueError: If a vector's length does not match the variables.

    Example:
        >>> variables = [DecisionVariable("a", 0.0, 1.0), DecisionVariable("b", 0.0, 1.0)]
        >>> x1, x2 = np.array([0.2, 0.4]), np.array([0.6, 0.8])
        >>> sbx_crossover(x1, x2, variables, np.random.default_rng(42))

    References:
        Deb, K., & Agrawal, R. B. (1995). Simulated binary crossover for
        continuous search space. Complex Systems, 9(2), 115-148.
    """
    _check_length(x1, variables, "x1")
    _check_length(x2, variables, "x2")

    exponent = 1.0 / (eta + 1.0)

    for i, var in enumerate(variables):
        if rng.random() > 0.5:
            continue

        u = rng.random()
        beta = (2.0 * u) ** exponent if u <= 0.5 else (1.0 / (2.0 * (1.0 - u))) ** exponent

        a, b = x1[i], x2[i]
        c1 = 0.5 * ((1.0 + beta) * a + (1.0 - beta) * b)
        c2 = 0.5 * ((1.0 - beta) * a + (1.0 + beta) * b)

        x1[i] = var.clamp(c1)
        x2[i] = var.clamp(c2)


def polynomial_mutation(
    x: np.ndarray,
    variables: Sequence[DecisionVariable],
    rng: np.random.Generator,
    prob: float,
    eta: float = PM_ETA,
) -> None:
    """Apply polynomial mutation to a decision vector in place.

    Each gene is mutated with probability prob. Genes whose domain is narrower
    than RANGE_EPSILON are left untouched.

    Args:
        x: Decision vector, shape (n_vars,). Modified in place.
        variables: Variable domains used for scaling and clamping.
        rng: Random number generator shared by the run.
        prob: Per-gene mutation probability.
        eta: Distribution index (default 20.0). Higher values produce smaller
            perturbations.

    Raises:
        ValueError: If the vector's length does not match the variables.

    References:
        Deb, K., & Goyal, M. (1996). A combined genetic adaptive search (GeneAS)
        for engineering design. Computer Science and Informatics, 26(4), 30-45.
    """
    _check_length(x, variables, "x")

    mut_pow = 1.0 / (eta + 1.0)

    for i, var in enumerate(variables):
        if rng.random() > prob:
            continue

        delta_max = var.span
        if delta_max < RANGE_EPSILON:
            continue

        y = x[i]
        delta1 = (y - var.min) / delta_max
        delta2 = (var.max - y) / delta_max

        u = rng.random()

        if u <= 0.5:
            # Mutation towards lower bound
            xy = 1.0 - delta1
            val = 2.0 * u + (1.0 - 2.0 * u) * xy ** (eta + 1.0)
            delta_q = val**mut_pow - 1.0
        else:
            # Mutation towards upper bound
            xy = 1.0 - delta2
            val = 2.0 * (1.0 - u) + 2.0 * (u - 0.5) * xy ** (eta + 1.0)
            delta_q = 1.0 - val**mut_pow

        x[i] = var.clamp(y + delta_q * delta_max)
