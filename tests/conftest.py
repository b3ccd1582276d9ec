"""Shared test fixtures for nsga-duo tests.

This module provides common fixtures used across test modules:
- rng: Seeded random number generator
- unit_variables / wide_variables: Decision variable layouts
- ScriptedRng: Generator stand-in that replays a fixed sequence of draws
- Small problems implementing the Problem protocol
"""

from collections.abc import Iterable

import numpy as np
import pytest

from nsga_duo import Candidate, DecisionVariable


class ScriptedRng:
    """Replay predetermined values for random() and integers().

    Lets tests pin down exactly which branch an operator takes. Running out of
    scripted values raises, so a test also proves how many draws were made.
    """

    def __init__(self, randoms: Iterable[float] = (), integers: Iterable[int] = ()) -> None:
        self._randoms = list(randoms)
        self._integers = list(integers)

    def random(self) -> float:
        if not self._randoms:
            raise AssertionError("ScriptedRng ran out of random() values")
        return self._randoms.pop(0)

    def integers(self, low: int, high: int, size: int) -> np.ndarray:
        if len(self._integers) < size:
            raise AssertionError("ScriptedRng ran out of integers() values")
        values = [self._integers.pop(0) for _ in range(size)]
        assert all(low <= v < high for v in values)
        return np.array(values)

    @property
    def exhausted(self) -> bool:
        return not self._randoms and not self._integers


def make_candidate(f1: float, f2: float, x: Iterable[float] = (0.0,), rank: int = 0, crowding: float = 0.0) -> Candidate:
    """Build an evaluated candidate with explicit fitness metadata."""
    return Candidate(x=np.array(list(x), dtype=np.float64), f1=f1, f2=f2, rank=rank, crowding=crowding)


class LinearTradeoff:
    """f1 = sum(x), f2 = sum(1 - x) over unit-interval variables."""

    def __init__(self, n_vars: int = 3) -> None:
        self._variables = [DecisionVariable(f"x{i}", 0.0, 1.0) for i in range(n_vars)]
        self.calls = 0

    def variables(self) -> list[DecisionVariable]:
        return self._variables

    def evaluate(self, x: np.ndarray) -> tuple[float, float]:
        self.calls += 1
        return float(x.sum()), float((1.0 - x).sum())


@pytest.fixture
def rng() -> np.random.Generator:
    """Provide a seeded random number generator for deterministic tests."""
    return np.random.default_rng(42)


@pytest.fixture
def unit_variables() -> list[DecisionVariable]:
    """Three variables on [0, 1]."""
    return [DecisionVariable(f"x{i}", 0.0, 1.0) for i in range(3)]


@pytest.fixture
def wide_variables() -> list[DecisionVariable]:
    """Variables with heterogeneous bounds, including a degenerate one."""
    return [
        DecisionVariable("power", 50.0, 400.0),
        DecisionVariable("fixed", 2.0, 2.0),
        DecisionVariable("offset", -5.0, 5.0),
    ]


@pytest.fixture
def linear_problem() -> LinearTradeoff:
    """Simple bi-objective problem whose objectives trade off linearly."""
    return LinearTradeoff(n_vars=3)


@pytest.fixture
def pareto_front_objectives() -> np.ndarray:
    """A Pareto front where no solution dominates another."""
    return np.array(
        [
            [1.0, 4.0],
            [2.0, 3.0],
            [3.0, 2.0],
            [4.0, 1.0],
        ]
    )
