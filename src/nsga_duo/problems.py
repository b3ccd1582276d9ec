"""Concrete problems implementing the Problem protocol.

The ZDT (Zitzler-Deb-Thiele) problems are standard bi-objective benchmarks:
- n decision variables in [0, 1]
- 2 objectives to minimize
- Known Pareto-optimal fronts for validation (x_i = 0 for i > 1)

CarDesignProblem is a small engineering demo: choose engine power, vehicle
weight and aerodynamic drag coefficient to maximize top speed while minimizing
a fuel consumption score.

References:
    Zitzler, E., Deb, K., & Thiele, L. (2000). Comparison of multiobjective
    evolutionary algorithms: Empirical results. Evolutionary computation, 8(2), 173-195.
"""

from collections.abc import Callable

import numpy as np

from nsga_duo.protocols import Problem
from nsga_duo.variables import DecisionVariable


class _ZDT:
    """Shared variable layout of the ZDT problems."""

    def __init__(self, n_vars: int = 30):
        if n_vars < 2:
            raise ValueError(f"ZDT problems need at least 2 variables, got {n_vars}")
        self.n_vars = n_vars
        self._variables = tuple(DecisionVariable(f"x{i}", 0.0, 1.0) for i in range(n_vars))

    def variables(self) -> tuple[DecisionVariable, ...]:
        return self._variables

    def _g(self, x: np.ndarray) -> float:
        return 1.0 + 9.0 * float(np.mean(x[1:]))


class ZDT1(_ZDT):
    """ZDT1: convex Pareto front, f2 = 1 - sqrt(f1) at the optimum."""

    def evaluate(self, x: np.ndarray) -> tuple[float, float]:
        f1 = float(x[0])
        g = self._g(x)
        return f1, g * (1.0 - np.sqrt(f1 / g))


class ZDT2(_ZDT):
    """ZDT2: non-convex (concave) Pareto front, f2 = 1 - f1^2 at the optimum."""

    def evaluate(self, x: np.ndarray) -> tuple[float, float]:
        f1 = float(x[0])
        g = self._g(x)
        return f1, g * (1.0 - (f1 / g) ** 2)


class ZDT3(_ZDT):
    """ZDT3: discontinuous Pareto front made of several convex parts."""

    def evaluate(self, x: np.ndarray) -> tuple[float, float]:
        f1 = float(x[0])
        g = self._g(x)
        h = 1.0 - np.sqrt(f1 / g) - (f1 / g) * np.sin(10.0 * np.pi * f1)
        return f1, g * h


class CarDesignProblem:
    """Trade top speed against fuel consumption for a car design.

    Variables (in order): engine power [50, 400], weight in kg [800, 2500],
    drag coefficient [0.2, 0.6].

    Objectives:
        f1: negated top speed in km/h (speed is maximized).
        f2: fuel consumption score.
    """

    def __init__(self) -> None:
        self._variables = (
            DecisionVariable("power", 50.0, 400.0),
            DecisionVariable("weight", 800.0, 2500.0),
            DecisionVariable("drag", 0.2, 0.6),
        )

    def variables(self) -> tuple[DecisionVariable, ...]:
        return self._variables

    def evaluate(self, x: np.ndarray) -> tuple[float, float]:
        power, weight, drag = float(x[0]), float(x[1]), float(x[2])
        speed = 22.5 * (power / (drag * 0.5)) ** 0.33
        consumption = power * 0.04 + weight * 0.003 + drag * 10.0
        return -speed, consumption


# Registry of the bundled problems, keyed by CLI name
PROBLEMS: dict[str, Callable[..., Problem]] = {
    "car": CarDesignProblem,
    "zdt1": ZDT1,
    "zdt2": ZDT2,
    "zdt3": ZDT3,
}
