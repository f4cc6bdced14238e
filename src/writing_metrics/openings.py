from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence

from .lexicons import (
    GOOD_TRANSITION_WORDS,
    IMPACT_WORDS,
    OPENING_PREPOSITION,
    OPENING_TYPE_PATTERNS,
)
from .models import OpeningDetail, OpeningType, OpeningVarietyReport
from .tokenization import sentences, split_whitespace

CONCENTRATION_LIMIT = 30.0
LOW_VARIETY_SUGGESTION = (
    "Increase the variety in your sentence openings for better engagement."
)


def categorize_opening(first_word: str) -> OpeningType:
    for opening_type, pattern in OPENING_TYPE_PATTERNS:
        if pattern.match(first_word):
            return opening_type
    return OpeningType.OTHER


def opening_complexity(lead: Sequence[str]) -> int:
    average_length = sum(len(word) for word in lead) / len(lead)
    complexity = 50
    if average_length > 6:
        complexity += 20
    if len(lead) > 2:
        complexity += 15
    if any(word.endswith("ly") for word in lead):
        complexity += 10
    if OPENING_PREPOSITION.match(lead[0]):
        complexity += 5
    return min(100, complexity)


def opening_strength(lead: Sequence[str], sentence: str) -> float:
    main_clause = sentence.split(",")[0].lower()
    criteria = (
        not any(len(word) > 12 for word in lead),
        any(word.lower() in IMPACT_WORDS for word in lead),
        any(word.lower() in main_clause for word in lead),
    )
    return sum(criteria) * 33.33


def describe_opening(sentence: str) -> OpeningDetail:
    tokens = split_whitespace(sentence)
    lead = tokens[:3]
    return OpeningDetail(
        first_word=tokens[0].lower(),
        first_phrase=" ".join(lead).lower(),
        type=categorize_opening(tokens[0]),
        complexity=opening_complexity(lead),
        strength=opening_strength(lead, sentence),
    )


def type_distribution(openings: Sequence[OpeningDetail]) -> Dict[str, float]:
    counts = Counter(opening.type.value for opening in openings)
    return {kind: count / len(openings) * 100 for kind, count in counts.items()}


def pattern_quality(openings: Sequence[OpeningDetail]) -> float:
    """Penalise back-to-back repeated types and any type above a 30% share."""
    score = 100.0
    for previous, current in zip(openings, openings[1:]):
        if current.type == previous.type:
            score -= 5
    for share in type_distribution(openings).values():
        if share > CONCENTRATION_LIMIT:
            score -= share - CONCENTRATION_LIMIT
    return max(0.0, score)


def transition_strength(openings: Sequence[OpeningDetail]) -> float:
    score = 100.0
    for previous, current in zip(openings, openings[1:]):
        if current.first_word == previous.first_word:
            score -= 10
        if current.type == previous.type:
            score -= 5
        if current.first_word in GOOD_TRANSITION_WORDS:
            score += 5
    return max(0.0, min(100.0, score))


def opening_variety(sentence_list: Sequence[str]) -> OpeningVarietyReport:
    openings: List[OpeningDetail] = [
        describe_opening(s) for s in sentence_list if split_whitespace(s)
    ]
    if not openings:
        return OpeningVarietyReport()

    total = len(openings)
    unique_words = len({o.first_word for o in openings}) / total * 100
    phrase_variety = len({o.first_phrase for o in openings}) / total * 100
    patterns = pattern_quality(openings)
    transitions = transition_strength(openings)
    score = (
        unique_words * 0.3 + phrase_variety * 0.25 + patterns * 0.25 + transitions * 0.2
    )
    suggestions = (LOW_VARIETY_SUGGESTION,) if unique_words < 50 else ()
    return OpeningVarietyReport(
        score=score,
        unique_word_variety=unique_words,
        phrase_variety=phrase_variety,
        type_distribution=type_distribution(openings),
        pattern_quality=patterns,
        transition_strength=transitions,
        openings=tuple(openings),
        suggestions=suggestions,
    )


def analyze_openings(text: str) -> OpeningVarietyReport:
    return opening_variety(sentences(text))
