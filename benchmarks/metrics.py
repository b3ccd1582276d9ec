"""Quality metrics for bi-objective front approximations."""

import numpy as np
from pymoo.indicators.hv import HV

# Slightly worse than the ZDT nadir point (1, 1)
ZDT_REF_POINT = np.array([1.1, 1.1])


def hypervolume(objectives: np.ndarray, ref_point: np.ndarray | None = None) -> float:
    """Compute the hypervolume dominated by a front, bounded by ref_point.

    Args:
        objectives: (n, 2) objective values of the front approximation.
        ref_point: Reference point. Defaults to ZDT_REF_POINT.

    Returns:
        Hypervolume value (higher is better).

    Raises:
        ValueError: If objectives is empty or not 2D.
    """
    if objectives.size == 0:
        raise ValueError("objectives array cannot be empty")
    if objectives.ndim != 2:
        raise ValueError(f"objectives must be 2D array, got shape {objectives.shape}")

    indicator = HV(ref_point=ZDT_REF_POINT if ref_point is None else ref_point)
    return float(indicator(objectives))
