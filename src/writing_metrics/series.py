"""
Chart-facing projections of analysis records.

Every function returns plain lists so the output can be handed directly to a
plotting or dashboard layer.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Dict, List, Sequence

from .models import (
    CohesionRecord,
    ComplexityProfile,
    ReadingTimeDistribution,
    StyleSeries,
)
from .scoring import clamp, round_half_up, round_int, smooth_series


def reading_time_shares(distribution: ReadingTimeDistribution) -> List[int]:
    """Bucket durations as rounded shares of their total."""
    seconds = [
        distribution.quick.seconds,
        distribution.medium.seconds,
        distribution.thorough.seconds,
    ]
    total = sum(seconds)
    if total == 0:
        return [0, 0, 0]
    return [round_int(value / total * 100) for value in seconds]


def complexity_series(profile: ComplexityProfile) -> List[float]:
    return [
        min(100.0, profile.vocabulary),
        min(100.0, profile.sentence_length),
        min(100.0, profile.structure),
        min(100.0, profile.readability),
        min(100.0, profile.technical),
    ]


def style_evolution_series(series: StyleSeries) -> Dict[str, List[Any]]:
    """Pad short series to two points, otherwise smooth interior points."""
    if len(series.data) < 2:
        value = series.data[0] if series.data else 0
        return {"labels": ["Start", "End"], "data": [value, value]}
    return {"labels": list(series.labels), "data": smooth_series(series.data)}


def lexical_density_split(content_words: int, function_words: int) -> List[float]:
    total = content_words + function_words
    if total == 0:
        return [50.0, 50.0]
    content_share = content_words / total * 100
    return [round_half_up(content_share, 1), round_half_up(100 - content_share, 1)]


def cohesion_series(records: Sequence[CohesionRecord]) -> Dict[str, List[float]]:
    """Scale transition and reference counts against a floor of 5."""
    transitions = [record.transitions for record in records]
    references = [record.references for record in records]
    max_transitions = max([*transitions, 5])
    max_references = max([*references, 5])
    return {
        "transitions": [value / max_transitions * 100 for value in transitions],
        "references": [value / max_references * 100 for value in references],
        "coherence": [clamp(record.coherence) for record in records],
    }


def validate_numeric_series(
    values: Sequence[Any], lower: float = 0.0, upper: float = 100.0
) -> List[float]:
    """Replace non-numeric or NaN entries with 0 and clamp the rest."""
    cleaned: List[float] = []
    for value in values:
        if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
            cleaned.append(0.0)
            continue
        cleaned.append(clamp(float(value), lower, upper))
    return cleaned


def ensure_minimum_points(values: Sequence[Any], minimum: int = 2) -> List[Any]:
    if len(values) < minimum:
        return [values[0] if values else 0] * minimum
    return list(values)
