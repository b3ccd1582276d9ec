"""Parent selection for NSGA-II."""

from nsga_duo.selection.crowded import crowded_tournament

__all__ = ["crowded_tournament"]
