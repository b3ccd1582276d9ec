"""Command-line entry point: run NSGA-II on a bundled problem and print the front.

Usage:
    nsga-duo --problem car --pop-size 100 --generations 100
    nsga-duo --problem zdt1 --n-vars 30 --seed 42
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from nsga_duo.algorithms.nsga2 import NSGA2
from nsga_duo.population import Candidate
from nsga_duo.problems import PROBLEMS, CarDesignProblem
from nsga_duo.protocols import Problem


def _probability(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a float in [0, 1], got '{raw}'") from exc
    if not 0.0 <= value <= 1.0:
        raise argparse.ArgumentTypeError(f"must be within [0, 1], got {value}")
    return value


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def _non_negative_int(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nsga-duo",
        description="Run NSGA-II on a bundled bi-objective problem and print the final Pareto front.",
    )
    parser.add_argument("--problem", choices=sorted(PROBLEMS), default="car", help="Problem to optimize.")
    parser.add_argument("--n-vars", type=_positive_int, default=30, help="Number of variables (ZDT problems only).")
    parser.add_argument("--pop-size", type=_positive_int, default=100, help="Population size.")
    parser.add_argument("--generations", type=_non_negative_int, default=100, help="Number of generations.")
    parser.add_argument("--crossover-prob", type=_probability, default=0.9, help="SBX probability per parent pair.")
    parser.add_argument("--mutation-prob", type=_probability, default=0.1, help="Mutation probability per gene.")
    parser.add_argument("--seed", type=_non_negative_int, default=None, help="Random seed (default: fresh entropy).")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    return parser


def make_problem(name: str, n_vars: int) -> Problem:
    factory = PROBLEMS[name]
    if name.startswith("zdt"):
        return factory(n_vars=n_vars)
    return factory()


def format_front(problem: Problem, front: Sequence[Candidate]) -> str:
    """Render the front as a fixed-width table, one row per candidate."""
    names = [v.name for v in problem.variables()]
    if isinstance(problem, CarDesignProblem):
        objective_names = ["speed (km/h)", "consumption"]
        rows = [(c.x, -c.f1, c.f2) for c in front]
    else:
        objective_names = ["f1", "f2"]
        rows = [(c.x, c.f1, c.f2) for c in front]

    header = " | ".join(f"{n:<10}" for n in names) + " || " + " | ".join(f"{n:<15}" for n in objective_names)
    lines = [header, "-" * len(header)]
    for x, o1, o2 in rows:
        cells = " | ".join(f"{v:<10.4g}" for v in x)
        lines.append(f"{cells} || {o1:<15.4f} | {o2:<15.4f}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        problem = make_problem(args.problem, args.n_vars)
    except ValueError as exc:
        parser.error(str(exc))

    optimizer = NSGA2(
        problem,
        pop_size=args.pop_size,
        n_generations=args.generations,
        crossover_prob=args.crossover_prob,
        mutation_prob=args.mutation_prob,
        seed=args.seed,
    )
    front = optimizer.run()

    print(f"\nFinal Pareto front ({len(front)} solutions, {optimizer.evaluations} evaluations)\n")
    print(format_front(problem, front))
    return 0


if __name__ == "__main__":
    sys.exit(main())
