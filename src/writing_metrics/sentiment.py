from __future__ import annotations

import re
from typing import List

from .lexicons import (
    INTENSIFIERS,
    NEGATIONS,
    PARAGRAPH_NEGATIVE_WORDS,
    PARAGRAPH_POSITIVE_WORDS,
    SENTIMENT_LEXICON,
)
from .models import (
    PolarityCounts,
    SentenceSentiment,
    SentimentLabel,
    SentimentMetrics,
    SentimentResult,
)
from .scoring import clamp
from .tokenization import SENTENCE_SPLIT_PATTERN, split_whitespace

STRIP_RE = re.compile(r"[^\w\s.!?]")
NON_WORD_RE = re.compile(r"\W+")

_LABEL_THRESHOLDS = (
    (75.0, SentimentLabel.VERY_POSITIVE),
    (60.0, SentimentLabel.POSITIVE),
    (40.0, SentimentLabel.NEUTRAL),
    (25.0, SentimentLabel.NEGATIVE),
)


def score_sentence(tokens: List[str]) -> tuple[float, int]:
    """
    Score one sentence's tokens left to right.

    Negations and intensifiers arm state that the next lexicon word consumes;
    any other token leaves that state untouched. Returns the signed sentence
    score and the number of lexicon words seen.
    """
    score = 0.0
    weighted = 0
    negated = False
    multiplier = 1.0
    for token in tokens:
        if token in NEGATIONS:
            negated = True
            continue
        if token in INTENSIFIERS:
            multiplier = INTENSIFIERS[token]
            continue
        value = SENTIMENT_LEXICON.get(token)
        if value is None:
            continue
        word_score = value * multiplier
        if negated:
            word_score = -word_score
            negated = False
        score += word_score
        multiplier = 1.0
        weighted += 1
    return score, weighted


def normalize_score(average: float) -> float:
    return clamp((average + 2) * 25)


def sentiment_label(normalized: float) -> SentimentLabel:
    for threshold, label in _LABEL_THRESHOLDS:
        if normalized >= threshold:
            return label
    return SentimentLabel.VERY_NEGATIVE


def analyze_sentiment(text: str) -> SentimentResult:
    cleaned = STRIP_RE.sub("", text.lower())
    total = 0.0
    weighted_total = 0
    details: List[SentenceSentiment] = []
    for fragment in SENTENCE_SPLIT_PATTERN.split(cleaned):
        sentence = fragment.strip()
        if not sentence:
            continue
        sentence_score, weighted = score_sentence(split_whitespace(sentence))
        total += sentence_score
        weighted_total += weighted
        if sentence_score != 0:
            details.append(SentenceSentiment(sentence=sentence, score=sentence_score))

    average = total / weighted_total if weighted_total else 0.0
    normalized = normalize_score(average)
    return SentimentResult(
        label=sentiment_label(normalized),
        normalized_score=normalized,
        details=tuple(details),
        metrics=SentimentMetrics(
            total_score=total, weighted_word_count=weighted_total, average_score=average
        ),
    )


def paragraph_polarity(paragraph: str) -> PolarityCounts:
    """Counts of fixed positive and negative words, each scaled by 10."""
    tokens = NON_WORD_RE.split(paragraph.lower())
    positive = sum(1 for token in tokens if token in PARAGRAPH_POSITIVE_WORDS)
    negative = sum(1 for token in tokens if token in PARAGRAPH_NEGATIVE_WORDS)
    return PolarityCounts(positive=positive * 10, negative=negative * 10)
