"""nsga-duo: NSGA-II for bi-objective problems with bounded real variables.

A numpy implementation of the Non-dominated Sorting Genetic Algorithm II with
simulated binary crossover, polynomial mutation and elitist crowding-based
survivor selection.

Example:
    >>> from nsga_duo import NSGA2, DecisionVariable
    >>> import numpy as np
    >>> class Schaffer:
    ...     def variables(self):
    ...         return [DecisionVariable("x", -10.0, 10.0)]
    ...     def evaluate(self, x):
    ...         return float(x[0] ** 2), float((x[0] - 2.0) ** 2)
    >>> front = NSGA2(Schaffer(), pop_size=20, n_generations=5, seed=42).run()
    >>> all(c.rank == 1 for c in front)
    True
"""

from nsga_duo.algorithms import NSGA2, nsga2
from nsga_duo.config import NSGA2Config
from nsga_duo.operators import (
    create_offspring,
    evaluate_population,
    polynomial_mutation,
    sbx_crossover,
)
from nsga_duo.population import Candidate, initialize_population
from nsga_duo.primitives import (
    crowding_distance,
    dominates,
    dominates_matrix,
    non_dominated_sort,
)
from nsga_duo.problems import ZDT1, ZDT2, ZDT3, CarDesignProblem
from nsga_duo.protocols import Problem
from nsga_duo.selection import crowded_tournament
from nsga_duo.survival import assign_rank_and_crowding, environmental_selection
from nsga_duo.variables import DecisionVariable

__all__ = [
    # Algorithm
    "NSGA2",
    "NSGA2Config",
    "nsga2",
    # Problem interface
    "Problem",
    "DecisionVariable",
    # Data structures
    "Candidate",
    "initialize_population",
    # Genetic operators
    "evaluate_population",
    "sbx_crossover",
    "polynomial_mutation",
    "create_offspring",
    "crowded_tournament",
    # Survival
    "assign_rank_and_crowding",
    "environmental_selection",
    # Primitives
    "dominates",
    "dominates_matrix",
    "non_dominated_sort",
    "crowding_distance",
    # Bundled problems
    "ZDT1",
    "ZDT2",
    "ZDT3",
    "CarDesignProblem",
]
