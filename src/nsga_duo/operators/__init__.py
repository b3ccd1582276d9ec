"""Genetic operators for NSGA-II.

This module provides:
- evaluate_population: evaluate candidates through a problem
- sbx_crossover: Simulated Binary Crossover (in place)
- polynomial_mutation: Polynomial mutation (in place)
- create_offspring: Create offspring via selection, crossover, and mutation
"""

from nsga_duo.operators.base import evaluate_population
from nsga_duo.operators.offspring import create_offspring
from nsga_duo.operators.standard import PM_ETA, SBX_ETA, polynomial_mutation, sbx_crossover

__all__ = ["evaluate_population", "sbx_crossover", "polynomial_mutation", "create_offspring", "SBX_ETA", "PM_ETA"]
