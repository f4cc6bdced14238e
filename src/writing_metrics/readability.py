from __future__ import annotations

import math
import re
from typing import List, Sequence

from .models import (
    ComplexityProfile,
    ReadabilityLevel,
    ReadabilityResult,
    ReadingTimeBucket,
    ReadingTimeDistribution,
    ReadingTimeMetrics,
    StyleSeries,
    TextStatistics,
)
from .scoring import clamp, round_half_up, round_int
from .tokenization import paragraphs, sentences, split_whitespace, words

AVERAGE_READING_WPM = 238.0

NON_LETTER_RE = re.compile(r"[^a-z]")
SILENT_SUFFIX_RE = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
LEADING_Y_RE = re.compile(r"^y")
VOWEL_CLUSTER_RE = re.compile(r"[aeiouy]{1,2}")
CLAUSE_PUNCTUATION = (",", ";", ":")

# Lower bounds (exclusive) for each level, hardest band is the fallback.
_LEVEL_THRESHOLDS = (
    (90.0, ReadabilityLevel.VERY_EASY),
    (80.0, ReadabilityLevel.EASY),
    (70.0, ReadabilityLevel.FAIRLY_EASY),
    (60.0, ReadabilityLevel.STANDARD),
    (50.0, ReadabilityLevel.FAIRLY_DIFFICULT),
    (30.0, ReadabilityLevel.DIFFICULT),
)


def syllable_count(word: str) -> int:
    """Estimate syllables in a word. Never returns less than 1."""
    cleaned = NON_LETTER_RE.sub("", word.lower())
    if len(cleaned) <= 3:
        return 1
    cleaned = SILENT_SUFFIX_RE.sub("", cleaned)
    cleaned = LEADING_Y_RE.sub("", cleaned)
    clusters = VOWEL_CLUSTER_RE.findall(cleaned)
    return len(clusters) or 1


def total_syllables(tokens: Sequence[str]) -> int:
    return sum(syllable_count(token) for token in tokens)


def flesch_reading_ease(word_count: int, sentence_count: int, syllables: int) -> float:
    """Flesch reading ease clamped to [0, 100]."""
    asl = word_count / (sentence_count or 1)
    asw = syllables / (word_count or 1)
    return clamp(206.835 - 1.015 * asl - 84.6 * asw)


def flesch_kincaid_grade(word_count: int, sentence_count: int, syllables: int) -> float:
    """Flesch-Kincaid grade level to one decimal. Deliberately unclamped."""
    asl = word_count / (sentence_count or 1)
    asw = syllables / (word_count or 1)
    return round_half_up(0.39 * asl + 11.8 * asw - 15.59, 1)


def readability_level(score: float) -> ReadabilityLevel:
    for threshold, level in _LEVEL_THRESHOLDS:
        if score > threshold:
            return level
    return ReadabilityLevel.VERY_DIFFICULT


def analyze_readability(text: str) -> ReadabilityResult:
    tokens = words(text)
    sentence_count = len(sentences(text))
    syllables = total_syllables(tokens)
    score = round_half_up(flesch_reading_ease(len(tokens), sentence_count, syllables), 1)
    return ReadabilityResult(
        score=score,
        grade=flesch_kincaid_grade(len(tokens), sentence_count, syllables),
        level=readability_level(score),
        avg_sentence_length=round_half_up(len(tokens) / (sentence_count or 1), 1),
        avg_syllables_per_word=round_half_up(syllables / (len(tokens) or 1), 2),
    )


def text_statistics(text: str) -> TextStatistics:
    """Basic counts; averages fall back to a denominator of 1."""
    tokens = words(text)
    sentence_count = len(sentences(text))
    syllables = total_syllables(tokens)
    word_count = len(tokens)
    return TextStatistics(
        word_count=word_count,
        sentence_count=sentence_count,
        paragraph_count=len(paragraphs(text)),
        char_count=len(text),
        avg_word_length=round_half_up(len(text) / (word_count or 1), 1),
        avg_sentence_length=round_half_up(word_count / (sentence_count or 1), 1),
        avg_syllables_per_word=round_half_up(syllables / (word_count or 1), 2),
    )


def assess_complexity(tokens: Sequence[str], sentence_list: Sequence[str]) -> ComplexityProfile:
    """Five independently clamped complexity sub-scores."""
    word_count = len(tokens)
    sentence_count = len(sentence_list)
    vocabulary = (len(set(tokens)) / word_count) * 100 if word_count else 0.0
    avg_sentence_words = sum(len(split_whitespace(s)) for s in sentence_list) / (
        sentence_count or 1
    )
    clause_heavy = sum(
        1 for s in sentence_list if any(mark in s for mark in CLAUSE_PUNCTUATION)
    )
    technical_terms = sum(
        1 for token in tokens if len(token) > 6 or token[:1].isupper() or "-" in token
    )
    return ComplexityProfile(
        vocabulary=clamp(vocabulary),
        sentence_length=clamp((avg_sentence_words / 30) * 100),
        structure=clamp((clause_heavy / (sentence_count or 1)) * 80),
        readability=flesch_reading_ease(word_count, sentence_count, total_syllables(tokens)),
        technical=clamp((technical_terms / (word_count or 1)) * 100),
        complex_words=sum(1 for token in tokens if syllable_count(token) > 2),
        average_word_length=sum(len(token) for token in tokens) / (word_count or 1),
    )


def analyze_complexity(text: str) -> ComplexityProfile:
    return assess_complexity(words(text), sentences(text))


def reading_time_distribution(
    text: str, words_per_minute: float = AVERAGE_READING_WPM
) -> ReadingTimeDistribution:
    """
    Split estimated reading effort into quick, medium and thorough buckets.

    Percentages are computed independently and are not normalised, so they
    need not sum to 100. Bucket durations are 0.7x, 1.0x and 1.3x of the
    complexity-adjusted reading time.
    """
    tokens = words(text)
    word_count = len(tokens)
    if word_count == 0:
        empty = ReadingTimeBucket(percentage=0.0, seconds=0)
        return ReadingTimeDistribution(
            quick=empty,
            medium=empty,
            thorough=empty,
            metrics=ReadingTimeMetrics(
                estimated_minutes=0, words_per_minute=0, complexity_factor=1.0
            ),
        )

    sentence_count = len(sentences(text))
    complex_ratio = sum(1 for token in tokens if syllable_count(token) > 2) / word_count
    avg_word_length = sum(len(token) for token in tokens) / word_count
    avg_sentence_length = word_count / (sentence_count or 1)
    factor = (
        1
        + complex_ratio * 0.4
        + min(1.0, avg_sentence_length / 20) * 0.3
        + min(1.0, avg_word_length / 6) * 0.3
    )
    adjusted = (word_count / words_per_minute) * 60 * factor

    quick_pct = min(100.0, word_count / 500 * 100)
    medium_pct = min(100.0, word_count / 1000 * 100)
    thorough_pct = max(0.0, 100 - quick_pct - medium_pct)
    minutes = adjusted / 60
    return ReadingTimeDistribution(
        quick=ReadingTimeBucket(percentage=quick_pct, seconds=round_int(adjusted * 0.7)),
        medium=ReadingTimeBucket(percentage=medium_pct, seconds=round_int(adjusted)),
        thorough=ReadingTimeBucket(
            percentage=thorough_pct, seconds=round_int(adjusted * 1.3)
        ),
        metrics=ReadingTimeMetrics(
            estimated_minutes=math.ceil(minutes),
            words_per_minute=round_int(word_count / minutes) if minutes else 0,
            complexity_factor=round_half_up(factor, 2),
        ),
    )


def writing_style_evolution(text: str) -> StyleSeries:
    """Per-paragraph Flesch scores for paragraphs with at least three tokens."""
    labels: List[str] = []
    data: List[float] = []
    for idx, paragraph in enumerate(paragraphs(text)):
        if len(split_whitespace(paragraph)) < 3:
            continue
        tokens = words(paragraph)
        sentence_count = len(sentences(paragraph))
        if not tokens or sentence_count == 0:
            continue
        syllables = sum(len(VOWEL_CLUSTER_RE.findall(token)) or 1 for token in tokens)
        labels.append(f"Para {idx + 1}")
        data.append(flesch_reading_ease(len(tokens), sentence_count, syllables))
    return StyleSeries(labels=tuple(labels), data=tuple(data))
