from __future__ import annotations

import math
from typing import Iterable, List, Sequence


def clamp(value: float, lower: float = 0.0, upper: float = 100.0) -> float:
    """Bound value to [lower, upper]."""
    return max(lower, min(upper, value))


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, independent of banker's rounding."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    return int(round_half_up(value))


def safe_mean(values: Iterable[float], default: float = 0.0) -> float:
    """Arithmetic mean that returns default for an empty input."""
    items = list(values)
    if not items:
        return default
    return sum(items) / len(items)


def population_std_dev(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    avg = sum(values) / len(values)
    variance = sum((value - avg) ** 2 for value in values) / len(values)
    return math.sqrt(variance)


def smooth_series(values: Sequence[float]) -> List[float]:
    """
    Apply a three-point moving average to interior points.
    The first and last values are kept as-is.
    """
    length = len(values)
    smoothed: List[float] = []
    for idx, value in enumerate(values):
        if idx == 0 or idx == length - 1:
            smoothed.append(float(value))
            continue
        smoothed.append((values[idx - 1] + value + values[idx + 1]) / 3)
    return smoothed
