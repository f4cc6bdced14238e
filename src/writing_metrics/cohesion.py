from __future__ import annotations

from typing import Sequence, Tuple

from .lexicons import COHESION_TRANSITION_PATTERNS, REFERENCE_PATTERNS
from .models import ArgumentMetrics, CohesionRecord
from .scoring import clamp, round_int
from .sentiment import paragraph_polarity
from .tokenization import paragraphs, sentences, split_whitespace


def count_transitions(text: str) -> int:
    lowered = text.lower()
    return sum(len(pattern.findall(lowered)) for pattern in COHESION_TRANSITION_PATTERNS)


def count_references(text: str) -> int:
    """Bracket citations, author-year parentheticals, et al./ibid., quotations."""
    return sum(len(pattern.findall(text)) for pattern in REFERENCE_PATTERNS)


def paragraph_coherence(text: str) -> float:
    sentence_list = sentences(text)
    avg_length = sum(len(split_whitespace(s)) for s in sentence_list) / (
        len(sentence_list) or 1
    )
    return clamp(50 + count_transitions(text) * 8 + (20 - abs(15 - avg_length)))


def cohesion_record(paragraph: str) -> CohesionRecord:
    return CohesionRecord(
        transitions=count_transitions(paragraph),
        references=count_references(paragraph),
        coherence=paragraph_coherence(paragraph),
        sentiment=paragraph_polarity(paragraph),
    )


def analyze_cohesion(text: str) -> Tuple[CohesionRecord, ...]:
    return tuple(cohesion_record(paragraph) for paragraph in paragraphs(text))


def argument_metrics(records: Sequence[CohesionRecord]) -> ArgumentMetrics:
    """Evidence, logic, support and their weighted impact blend."""
    paragraph_count = len(records) or 1
    references = sum(record.references for record in records)
    transitions = sum(record.transitions for record in records)
    mean_coherence = sum(record.coherence for record in records) / paragraph_count

    evidence = min(100.0, (references / paragraph_count) * 30)
    support = min(100.0, (transitions / paragraph_count) * 30)
    transition_strength = min(100.0, (transitions / (paragraph_count * 2)) * 100)
    logic = mean_coherence * 0.5 + transition_strength * 0.5
    impact = evidence * 0.35 + logic * 0.4 + support * 0.25
    return ArgumentMetrics(
        evidence=round_int(evidence),
        logic=round_int(logic),
        support=round_int(support),
        impact=round_int(impact),
    )
