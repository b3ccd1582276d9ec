"""Protocol definition for the problems the NSGA-II engine optimizes.

The engine never owns a problem definition. It only consumes the two-method
capability described by Problem: an ordered list of decision variables and a
pure bi-objective evaluation function. Concrete problems (see
nsga_duo.problems) are swappable implementations of this protocol.

Example usage:
    ```python
    class Sphere2:
        def variables(self):
            return [DecisionVariable("x", -1.0, 1.0)]

        def evaluate(self, x):
            return float(x[0] ** 2), float((x[0] - 1.0) ** 2)

    front = NSGA2(Sphere2(), pop_size=20, n_generations=10, seed=0).run()
    ```
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

import numpy as np

from nsga_duo.variables import DecisionVariable


@runtime_checkable
class Problem(Protocol):
    """Protocol for bi-objective minimization problems.

    Both objectives are minimized. A problem that wants to maximize an
    objective negates it before returning it.

    Methods:
        variables: Ordered sequence of decision variables. Must have at least
            one entry and must not change during a run.
        evaluate: Map a decision vector of shape (n_vars,) to (f1, f2). Must be
            free of side effects visible to the engine. It is called exactly
            once per evaluation point.
    """

    def variables(self) -> Sequence[DecisionVariable]:
        """Return the ordered decision variables."""
        ...

    def evaluate(self, x: np.ndarray) -> tuple[float, float]:
        """Return the two objective values for decision vector x."""
        ...
