"""Engine configuration for NSGA-II runs.

NSGA2Config is an immutable (frozen dataclass) record of the run parameters,
validated on construction so a misconfigured run fails before any evaluation.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class NSGA2Config:
    """Run parameters of the NSGA-II engine.

    Attributes:
        pop_size: Population size N. Must be positive.
        n_generations: Number of generations to run. Must be non-negative.
        crossover_prob: Probability that a parent pair is recombined with SBX.
            Must lie in [0, 1]. Default 0.9.
        mutation_prob: Per-gene polynomial mutation probability. Must lie in
            [0, 1]. Default 0.1.
        seed: Random seed, non-negative. None draws fresh entropy from the
            operating system.

    Example:
        >>> config = NSGA2Config(pop_size=100, n_generations=250, seed=42)
        >>> config.crossover_prob
        0.9
    """

    pop_size: int
    n_generations: int
    crossover_prob: float = 0.9
    mutation_prob: float = 0.1
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate parameter types and ranges.

        Raises:
            TypeError: If a size or the seed is not an integer.
            ValueError: If a size, probability or the seed is out of range.
        """
        for name in ("pop_size", "n_generations"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, (int, np.integer))):
            raise TypeError(f"seed must be an integer or None, got {type(self.seed).__name__}")

        if self.pop_size <= 0:
            raise ValueError(f"pop_size must be positive, got {self.pop_size}")
        if self.n_generations < 0:
            raise ValueError(f"n_generations must be non-negative, got {self.n_generations}")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")
        for name in ("crossover_prob", "mutation_prob"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")

        object.__setattr__(self, "pop_size", int(self.pop_size))
        object.__setattr__(self, "n_generations", int(self.n_generations))
        object.__setattr__(self, "crossover_prob", float(self.crossover_prob))
        object.__setattr__(self, "mutation_prob", float(self.mutation_prob))
