from __future__ import annotations

import math
import re
from typing import List

from .lexicons import FUNCTION_WORDS
from .models import LexicalDensity, VocabularyDiversity
from .scoring import round_half_up
from .tokenization import words

LETTER_WORD_RE = re.compile(r"\b[a-z]+\b", re.ASCII)
MAX_WINDOW_SIZE = 100


def lexical_density(text: str) -> LexicalDensity:
    """Share of content words among alphabetic tokens, as a percentage."""
    tokens = LETTER_WORD_RE.findall(text.lower())
    function_count = sum(1 for token in tokens if token in FUNCTION_WORDS)
    content_count = len(tokens) - function_count
    total = content_count + function_count
    density = (content_count / total) * 100 if total else 0.0
    return LexicalDensity(
        content_words=content_count,
        function_word_count=function_count,
        total=total,
        density=round_half_up(density, 2),
    )


def vocabulary_diversity(text: str) -> VocabularyDiversity:
    """
    Type-token ratios: basic, moving-window and root.

    Root TTR is the square root of the basic percentage, not
    unique/sqrt(total).
    """
    tokens = words(text)
    total = len(tokens)
    unique = len(set(tokens))
    if total == 0:
        return VocabularyDiversity(
            basic=0.0, moving=0.0, root=0.0, unique_words=0, total_words=0
        )

    ratio_pct = (unique / total) * 100
    ratios = _window_ratios(tokens)
    moving = (sum(ratios) / len(ratios)) * 100 if ratios else 0.0
    return VocabularyDiversity(
        basic=round_half_up(ratio_pct, 1),
        moving=round_half_up(moving, 1),
        root=round_half_up(math.sqrt(ratio_pct), 1),
        unique_words=unique,
        total_words=total,
    )


def _window_ratios(tokens: List[str]) -> List[float]:
    total = len(tokens)
    window_size = min(MAX_WINDOW_SIZE, total // 3)
    if window_size == 0:
        return []
    stride = window_size / 2
    ratios: List[float] = []
    start = 0.0
    while start < total - window_size:
        # Fractional starts truncate, matching slice semantics on the half stride.
        lo = int(start)
        hi = int(start + window_size)
        ratios.append(len(set(tokens[lo:hi])) / window_size)
        start += stride
    return ratios
