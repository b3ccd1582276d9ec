"""Survival strategies for NSGA-II."""

from nsga_duo.survival.nsga2 import assign_rank_and_crowding, environmental_selection

__all__ = ["assign_rank_and_crowding", "environmental_selection"]
