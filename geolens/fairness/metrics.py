"""Core inequality metrics shared by regional, bias and coverage scoring.

All functions take plain sequences of numbers and return Python floats.
"""

from typing import Sequence

import numpy as np


def compute_gini_coefficient(values: Sequence[float]) -> float:
    """Compute the Gini coefficient of a distribution.

    Uses the rank-weighted form on the ascending-sorted values:
    G = sum((2 * (i + 1) - n - 1) * a[i]) / (n * sum(a))

    For non-negative inputs this equals the pairwise mean absolute
    difference form sum(|a[i] - a[j]|) / (2 * n^2 * mean) in O(n log n).

    Args:
        values: Non-negative values (e.g. point counts per region).

    Returns:
        Gini coefficient in [0, 1]. 0 indicates perfect equality and is
        also returned for an empty input or a non-positive mean.
    """
    if len(values) == 0:
        return 0.0

    sorted_values = np.sort(np.asarray(values, dtype=np.float64))
    n = sorted_values.size
    total = np.sum(sorted_values)

    if total <= 0:
        return 0.0

    weights = 2 * np.arange(1, n + 1) - n - 1
    gini = np.sum(weights * sorted_values) / (n * total)

    return float(np.clip(gini, 0.0, 1.0))


def compute_coefficient_of_variation(values: Sequence[float]) -> float:
    """Compute coefficient of variation (std / mean).

    CV is a normalized measure of dispersion, used as the inequality index
    of regional point counts. Returns 0 if mean is 0.

    Args:
        values: Sequence of values.

    Returns:
        Coefficient of variation (population std / mean), or 0 if mean is 0.

    Raises:
        ValueError: If values is empty.
    """
    if len(values) == 0:
        raise ValueError("values cannot be empty")

    values_arr = np.array(values, dtype=np.float64)
    mean = np.mean(values_arr)
    std = np.std(values_arr)

    if mean == 0:
        return 0.0

    return float(std / mean)


def compute_deviation_from(values: Sequence[float], center: float) -> float:
    """Root mean squared deviation of values around a fixed center.

    Args:
        values: Sequence of values.
        center: Reference value (not necessarily the mean).

    Returns:
        sqrt(mean((values - center)^2)), or 0 for an empty input.
    """
    if len(values) == 0:
        return 0.0

    values_arr = np.array(values, dtype=np.float64)
    return float(np.sqrt(np.mean((values_arr - center) ** 2)))


def compute_mean(values: Sequence[float]) -> float:
    """Arithmetic mean, or 0 for an empty input."""
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=np.float64)))
