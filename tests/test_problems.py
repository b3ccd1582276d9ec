"""Tests for the bundled problems."""

import math

import numpy as np
import pytest

from nsga_duo import ZDT1, ZDT2, ZDT3, CarDesignProblem, DecisionVariable, Problem
from nsga_duo.problems import PROBLEMS

# =============================================================================
# TestZDT
# =============================================================================


class TestZDT:
    """Tests for the ZDT benchmark family."""

    @pytest.mark.parametrize("cls", [ZDT1, ZDT2, ZDT3])
    def test_variable_layout(self, cls: type) -> None:
        """n_vars unit-interval variables named x0, x1, ..."""
        variables = cls(n_vars=4).variables()
        assert [v.name for v in variables] == ["x0", "x1", "x2", "x3"]
        assert all(isinstance(v, DecisionVariable) and (v.min, v.max) == (0.0, 1.0) for v in variables)

    @pytest.mark.parametrize("cls", [ZDT1, ZDT2, ZDT3])
    def test_default_is_thirty_variables(self, cls: type) -> None:
        """The classic configuration uses 30 variables."""
        assert len(cls().variables()) == 30

    @pytest.mark.parametrize("cls", [ZDT1, ZDT2, ZDT3])
    def test_rejects_single_variable(self, cls: type) -> None:
        """g(x) needs at least one tail variable."""
        with pytest.raises(ValueError, match="at least 2"):
            cls(n_vars=1)

    @pytest.mark.parametrize("cls", [ZDT1, ZDT2, ZDT3])
    def test_satisfies_protocol(self, cls: type) -> None:
        """Every ZDT problem is a Problem."""
        assert isinstance(cls(n_vars=2), Problem)

    def test_zdt1_origin(self) -> None:
        """At x = 0 the objectives are (0, 1)."""
        assert ZDT1(n_vars=2).evaluate(np.zeros(2)) == (0.0, 1.0)

    def test_zdt1_on_front(self) -> None:
        """With a zero tail f2 = 1 - sqrt(f1)."""
        f1, f2 = ZDT1(n_vars=3).evaluate(np.array([0.25, 0.0, 0.0]))
        assert f1 == 0.25
        assert f2 == pytest.approx(0.5)

    def test_zdt1_tail_raises_g(self) -> None:
        """A tail of ones gives g = 10."""
        f1, f2 = ZDT1(n_vars=3).evaluate(np.array([0.0, 1.0, 1.0]))
        assert f1 == 0.0
        assert f2 == pytest.approx(10.0)

    def test_zdt2_on_front(self) -> None:
        """With a zero tail f2 = 1 - f1^2."""
        _, f2 = ZDT2(n_vars=2).evaluate(np.array([0.5, 0.0]))
        assert f2 == pytest.approx(0.75)

    def test_zdt3_on_front(self) -> None:
        """With a zero tail f2 = 1 - sqrt(f1) - f1 sin(10 pi f1)."""
        f1 = 0.15
        _, f2 = ZDT3(n_vars=2).evaluate(np.array([f1, 0.0]))
        assert f2 == pytest.approx(1.0 - math.sqrt(f1) - f1 * math.sin(10.0 * math.pi * f1))

    def test_returns_python_floats(self) -> None:
        """Objectives come back as two floats."""
        result = ZDT2(n_vars=2).evaluate(np.array([0.3, 0.6]))
        assert len(result) == 2
        assert all(isinstance(v, float) for v in result)


# =============================================================================
# TestCarDesignProblem
# =============================================================================


class TestCarDesignProblem:
    """Tests for the car design demo problem."""

    def test_variables(self) -> None:
        """Power, weight and drag with their engineering ranges."""
        variables = CarDesignProblem().variables()
        assert [(v.name, v.min, v.max) for v in variables] == [
            ("power", 50.0, 400.0),
            ("weight", 800.0, 2500.0),
            ("drag", 0.2, 0.6),
        ]

    def test_objectives(self) -> None:
        """f1 is the negated top speed, f2 the consumption score."""
        f1, f2 = CarDesignProblem().evaluate(np.array([100.0, 1000.0, 0.5]))
        assert f1 == pytest.approx(-22.5 * 400.0**0.33)
        assert f2 == pytest.approx(4.0 + 3.0 + 5.0)

    def test_more_power_is_faster_and_thirstier(self) -> None:
        """Raising power trades consumption for speed."""
        problem = CarDesignProblem()
        slow = problem.evaluate(np.array([100.0, 1200.0, 0.3]))
        fast = problem.evaluate(np.array([300.0, 1200.0, 0.3]))
        assert fast[0] < slow[0]
        assert fast[1] > slow[1]


# =============================================================================
# TestProblemRegistry
# =============================================================================


class TestProblemRegistry:
    """Tests for the PROBLEMS mapping used by the CLI."""

    def test_names(self) -> None:
        """All bundled problems are registered."""
        assert set(PROBLEMS) == {"car", "zdt1", "zdt2", "zdt3"}

    def test_factories_build_problems(self) -> None:
        """Each factory builds an object satisfying the protocol."""
        for factory in PROBLEMS.values():
            assert isinstance(factory(), Problem)
