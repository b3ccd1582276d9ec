"""NSGA-II driver for bi-objective problems.

This module provides the NSGA2 class, which owns the population and the random
generator for a run, and the nsga2() convenience function.

Each run follows the same state sequence:
    Init -> Evaluated -> {Offspring -> Merged -> Ranked -> Truncated} x n_generations -> Done

Example:
    >>> from nsga_duo import NSGA2, ZDT1
    >>>
    >>> optimizer = NSGA2(ZDT1(n_vars=30), pop_size=100, n_generations=250, seed=42)
    >>> front = optimizer.run()
    >>> print(f"Found {len(front)} solutions on the Pareto front")
    >>> print(f"Used {optimizer.evaluations} evaluations")
"""

import logging

import numpy as np

from nsga_duo.config import NSGA2Config
from nsga_duo.operators.base import evaluate_population
from nsga_duo.operators.offspring import create_offspring
from nsga_duo.population import Candidate, initialize_population
from nsga_duo.protocols import Problem
from nsga_duo.survival.nsga2 import assign_rank_and_crowding, environmental_selection
from nsga_duo.variables import DecisionVariable

logger = logging.getLogger(__name__)


class NSGA2:
    """NSGA-II multi-objective evolutionary algorithm.

    Evolves a population toward the Pareto front of a bi-objective
    minimization problem using crowded tournament selection, SBX crossover,
    polynomial mutation and elitist environmental selection.

    Attributes:
        problem: The problem being optimized.
        config: Validated run parameters.
        variables: Snapshot of the problem's decision variables.
        population: Final population of the last run (empty before a run).
        generations: Generations completed by the last run.
        evaluations: Problem evaluations performed by the last run.
    """

    def __init__(
        self,
        problem: Problem,
        pop_size: int,
        n_generations: int,
        crossover_prob: float = 0.9,
        mutation_prob: float = 0.1,
        seed: int | None = None,
    ):
        """Initialize the optimizer.

        Args:
            problem: Object implementing the Problem protocol.
            pop_size: Population size N.
            n_generations: Number of generations to run.
            crossover_prob: Probability of recombining a parent pair.
            mutation_prob: Per-gene mutation probability.
            seed: Random seed for reproducibility. If None, uses system entropy.

        Raises:
            TypeError: If problem does not implement the Problem protocol or a
                parameter has the wrong type.
            ValueError: If the problem has no decision variables, a variable is
                not a DecisionVariable, or a parameter is out of range.
        """
        if not isinstance(problem, Problem):
            raise TypeError(f"problem must implement variables() and evaluate(), got {type(problem).__name__}")

        self.config = NSGA2Config(
            pop_size=pop_size,
            n_generations=n_generations,
            crossover_prob=crossover_prob,
            mutation_prob=mutation_prob,
            seed=seed,
        )

        variables = tuple(problem.variables())
        if len(variables) == 0:
            raise ValueError("problem must define at least one decision variable")
        for i, var in enumerate(variables):
            if not isinstance(var, DecisionVariable):
                raise ValueError(f"variable {i} must be a DecisionVariable, got {type(var).__name__}")

        self.problem = problem
        self.variables = variables
        self.population: list[Candidate] = []
        self.generations = 0
        self.evaluations = 0

    @property
    def n_vars(self) -> int:
        """Number of decision variables."""
        return len(self.variables)

    def run(self) -> list[Candidate]:
        """Run the optimization for the configured number of generations.

        A new generator is seeded from config.seed on every call, so repeated
        runs with a seed produce identical results.

        Returns:
            The rank-1 candidates of the final population, sorted by f1
            ascending (ties keep population order).
        """
        cfg = self.config
        rng = np.random.default_rng(cfg.seed)

        logger.info(
            "Starting NSGA-II on %s: pop_size=%d, n_generations=%d, n_vars=%d, seed=%s",
            type(self.problem).__name__,
            cfg.pop_size,
            cfg.n_generations,
            self.n_vars,
            cfg.seed,
        )

        pop = initialize_population(self.variables, cfg.pop_size, rng)
        self.evaluations = evaluate_population(self.problem, pop, self.n_vars)
        assign_rank_and_crowding(pop)
        self.generations = 0

        report_every = max(1, cfg.n_generations // 10)

        for gen in range(cfg.n_generations):
            offspring = create_offspring(
                pop,
                cfg.pop_size,
                self.variables,
                rng,
                crossover_prob=cfg.crossover_prob,
                mutation_prob=cfg.mutation_prob,
            )
            self.evaluations += evaluate_population(self.problem, offspring, self.n_vars)

            combined = pop + offspring
            fronts = assign_rank_and_crowding(combined)
            pop = environmental_selection(combined, cfg.pop_size)
            self.generations = gen + 1

            logger.debug("Generation %d: %d fronts in combined population", gen + 1, len(fronts))
            if (gen + 1) % report_every == 0:
                front_size = sum(1 for c in pop if c.rank == 1)
                logger.info("Generation %d/%d - front 1 size: %d", gen + 1, cfg.n_generations, front_size)

        self.population = pop
        front = sorted((c for c in pop if c.rank == 1), key=lambda c: c.f1)

        logger.info("NSGA-II finished: %d solutions on front 1, %d evaluations", len(front), self.evaluations)

        return front


def nsga2(
    problem: Problem,
    pop_size: int,
    n_generations: int,
    crossover_prob: float = 0.9,
    mutation_prob: float = 0.1,
    seed: int | None = None,
) -> list[Candidate]:
    """Run NSGA-II once and return the final front.

    Shorthand for NSGA2(problem, ...).run(). See NSGA2 for the arguments.

    Example:
        >>> front = nsga2(ZDT1(n_vars=5), pop_size=20, n_generations=10, seed=0)
        >>> front == sorted(front, key=lambda c: c.f1)
        True
    """
    optimizer = NSGA2(
        problem,
        pop_size=pop_size,
        n_generations=n_generations,
        crossover_prob=crossover_prob,
        mutation_prob=mutation_prob,
        seed=seed,
    )
    return optimizer.run()
