from __future__ import annotations

from typing import Dict, Mapping

from .lexicons import DOMAIN_PROFILES, SEMANTIC_PATTERNS
from .models import (
    ContextPurpose,
    ContextStructure,
    ContextTone,
    DocumentContext,
    DocumentType,
)


def domain_scores(text: str) -> Dict[str, float]:
    """Weighted keyword scores per domain, in tie-break order."""
    scores: Dict[str, float] = {}
    for domain, keywords, secondary, weight in DOMAIN_PROFILES:
        hits = len(keywords.findall(text)) * 2 + len(secondary.findall(text))
        scores[domain.value] = hits * weight
    return scores


def semantic_counts(text: str) -> Dict[str, Dict[str, int]]:
    return {
        category: {label: len(pattern.findall(text)) for label, pattern in patterns}
        for category, patterns in SEMANTIC_PATTERNS.items()
    }


def _argmax(values: Mapping[str, float]) -> str:
    # max() keeps the first of equal keys, which is the enumeration order.
    return max(values, key=lambda key: values[key])


def classify_context(
    text: str, complexity: float, sentence_length: float
) -> DocumentContext:
    """
    Classify the document domain and its tone, structure and purpose.

    ``complexity`` is the already computed readability score and
    ``sentence_length`` the average sentence length; neither is derived from
    ``text`` here.
    """
    scores = domain_scores(text)
    counts = semantic_counts(text)
    return DocumentContext(
        primary_type=DocumentType(_argmax(scores)),
        scores=scores,
        tone=ContextTone(_argmax(counts["tone"])),
        structure=ContextStructure(_argmax(counts["structure"])),
        purpose=ContextPurpose(_argmax(counts["purpose"])),
        complexity=complexity,
        sentence_length=sentence_length,
        semantic_counts=counts,
    )
