"""Benchmark nsga-duo against pymoo's NSGA-II on ZDT1-3.

Both libraries run with the same population size, generation budget and
operator distribution indices; runs are compared by hypervolume of the final
front.

Usage:
    python benchmarks/zdt/run_benchmark.py
"""

import json
import logging
import sys
import time
from collections import defaultdict
from datetime import datetime, timezone
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np
from pymoo.algorithms.moo.nsga2 import NSGA2 as PymooNSGA2
from pymoo.core.problem import Problem as PymooProblem
from pymoo.operators.crossover.sbx import SBX
from pymoo.operators.mutation.pm import PM
from pymoo.operators.sampling.rnd import FloatRandomSampling
from pymoo.optimize import minimize
from pymoo.termination import get_termination

from benchmarks.metrics import hypervolume
from nsga_duo import NSGA2, ZDT1, ZDT2, ZDT3
from nsga_duo.operators import PM_ETA, SBX_ETA
from nsga_duo.protocols import Problem

logger = logging.getLogger(__name__)

# Experiment parameters
N_VARS = 30
POP_SIZE = 100
N_GENERATIONS = 250
CROSSOVER_PROB = 0.9
MUTATION_PROB = 1.0 / N_VARS
SEEDS = list(range(10))
PROBLEMS = {"ZDT1": ZDT1, "ZDT2": ZDT2, "ZDT3": ZDT3}
LIBRARIES = ["nsga-duo", "pymoo"]


def run_nsga_duo(problem: Problem, seed: int) -> tuple[float, float]:
    """Return (hypervolume, elapsed seconds) for one nsga-duo run."""
    optimizer = NSGA2(
        problem,
        pop_size=POP_SIZE,
        n_generations=N_GENERATIONS,
        crossover_prob=CROSSOVER_PROB,
        mutation_prob=MUTATION_PROB,
        seed=seed,
    )
    start = time.perf_counter()
    front = optimizer.run()
    elapsed = time.perf_counter() - start

    return hypervolume(np.array([c.objectives for c in front])), elapsed


class _PymooAdapter(PymooProblem):
    """Expose an nsga-duo problem to pymoo."""

    def __init__(self, problem: Problem) -> None:
        variables = problem.variables()
        super().__init__(
            n_var=len(variables),
            n_obj=2,
            xl=np.array([v.min for v in variables]),
            xu=np.array([v.max for v in variables]),
        )
        self._problem = problem

    def _evaluate(self, x: np.ndarray, out: dict, *args, **kwargs) -> None:
        out["F"] = np.array([self._problem.evaluate(xi) for xi in x])


def build_pymoo_algorithm() -> PymooNSGA2:
    """Configure pymoo's NSGA-II with the same operator rates as nsga-duo.

    pymoo gates SBX per pair with prob and per variable with prob_var (0.5 by
    default). Its PM prob is per individual, so the per-gene rate goes in
    prob_var and every individual enters mutation.
    """
    return PymooNSGA2(
        pop_size=POP_SIZE,
        sampling=FloatRandomSampling(),
        crossover=SBX(eta=SBX_ETA, prob=CROSSOVER_PROB, prob_var=0.5),
        mutation=PM(eta=PM_ETA, prob=1.0, prob_var=MUTATION_PROB),
        eliminate_duplicates=False,
    )


def run_pymoo(problem: Problem, seed: int) -> tuple[float, float]:
    """Return (hypervolume, elapsed seconds) for one pymoo run."""
    algorithm = build_pymoo_algorithm()

    start = time.perf_counter()
    result = minimize(
        _PymooAdapter(problem),
        algorithm,
        get_termination("n_gen", N_GENERATIONS),
        seed=seed,
        verbose=False,
    )
    elapsed = time.perf_counter() - start

    return hypervolume(result.opt.get("F")), elapsed


def run_benchmark() -> dict:
    """Run every library on every problem for every seed."""
    runners = {"nsga-duo": run_nsga_duo, "pymoo": run_pymoo}
    results = []
    total = len(PROBLEMS) * len(runners) * len(SEEDS)
    done = 0

    for problem_name, factory in PROBLEMS.items():
        for library, runner in runners.items():
            for seed in SEEDS:
                done += 1
                logger.info("Running [%d/%d]: %s on %s (seed=%d)", done, total, library, problem_name, seed)
                hv, elapsed = runner(factory(n_vars=N_VARS), seed)
                logger.info("  HV: %.4f, Time: %.2fs", hv, elapsed)
                results.append(
                    {
                        "library": library,
                        "problem": problem_name,
                        "seed": seed,
                        "hypervolume": hv,
                        "time_seconds": elapsed,
                    }
                )

    metadata = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "parameters": {
            "pop_size": POP_SIZE,
            "n_generations": N_GENERATIONS,
            "n_vars": N_VARS,
            "sbx_eta": SBX_ETA,
            "pm_eta": PM_ETA,
            "crossover_prob": CROSSOVER_PROB,
            "mutation_prob": MUTATION_PROB,
            "seeds": SEEDS,
        },
    }
    return {"metadata": metadata, "results": results}


def print_summary(results: dict) -> None:
    """Print mean +/- std hypervolume and mean time per problem and library."""
    hv = defaultdict(lambda: defaultdict(list))
    times = defaultdict(lambda: defaultdict(list))
    for r in results["results"]:
        hv[r["problem"]][r["library"]].append(r["hypervolume"])
        times[r["problem"]][r["library"]].append(r["time_seconds"])

    print("\n" + "=" * 72)
    print(f"pop_size={POP_SIZE}, generations={N_GENERATIONS}, runs={len(SEEDS)}")
    print("=" * 72)
    print(f"{'Problem':<10}" + "".join(f"{lib:>31}" for lib in LIBRARIES))
    for problem in sorted(hv):
        row = f"{problem:<10}"
        for lib in LIBRARIES:
            values = hv[problem][lib]
            row += f"{np.mean(values):>14.4f} +/- {np.std(values):.4f} {np.mean(times[problem][lib]):>6.2f}s"
        print(row)
    print()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    logger.info("Starting ZDT benchmark suite")
    results = run_benchmark()

    output_path = Path(__file__).parent / "results" / "benchmark_results.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)
    logger.info("Results saved to %s", output_path)

    print_summary(results)


if __name__ == "__main__":
    main()
