"""Offspring generation for NSGA-II.

Parents are chosen by crowded tournament, copied, recombined with SBX (gated
once per pair by the crossover probability) and mutated one child at a time.
"""

from collections.abc import Sequence

import numpy as np

from nsga_duo.operators.standard import polynomial_mutation, sbx_crossover
from nsga_duo.population import Candidate
from nsga_duo.selection.crowded import crowded_tournament
from nsga_duo.variables import DecisionVariable


def create_offspring(
    population: Sequence[Candidate],
    n_offspring: int,
    variables: Sequence[DecisionVariable],
    rng: np.random.Generator,
    crossover_prob: float,
    mutation_prob: float,
) -> list[Candidate]:
    """Create offspring via selection, crossover, and mutation.

    For each parent pair the generator is consumed in this order: first
    tournament, second tournament, crossover gate, SBX (when the gate passes),
    mutation of the first child, mutation of the second child. When n_offspring
    is odd the second child of the last pair is discarded after mutation.

    Args:
        population: Ranked parent population.
        n_offspring: Number of children to create.
        variables: Variable domains for the variation operators.
        rng: Random number generator shared by the run.
        crossover_prob: Probability that a parent pair is recombined.
        mutation_prob: Per-gene mutation probability.

    Returns:
        List of n_offspring children. Their objective values are copied from
        the parents and must be re-evaluated before ranking.

    Example:
        >>> children = create_offspring(pop, 10, variables, rng, 0.9, 0.1)
        >>> len(children)
        10
    """
    children: list[Candidate] = []

    while len(children) < n_offspring:
        p1 = crowded_tournament(population, rng)
        p2 = crowded_tournament(population, rng)

        c1 = p1.clone()
        c2 = p2.clone()

        if rng.random() < crossover_prob:
            sbx_crossover(c1.x, c2.x, variables, rng)

        polynomial_mutation(c1.x, variables, rng, mutation_prob)
        polynomial_mutation(c2.x, variables, rng, mutation_prob)

        children.append(c1)
        if len(children) < n_offspring:
            children.append(c2)

    return children
