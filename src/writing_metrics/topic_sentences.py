from __future__ import annotations

import re
from typing import List, Sequence

from .lexicons import (
    HOOK_CONTRAST,
    HOOK_PRONOUNCEMENT,
    HOOK_QUESTION,
    HOOK_QUOTE,
    HOOK_STATISTIC,
    JARGON_TERMS,
    PASSIVE_PATTERN,
    STOP_WORDS,
    TOPIC_TRANSITION_PHRASES,
    TOPIC_WORD_PATTERN,
)
from .models import TopicSentenceDetail, TopicSentenceReport
from .scoring import safe_mean
from .tokenization import paragraphs, split_whitespace

SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")

WEIGHTS = {
    "length": 0.2,
    "hook": 0.15,
    "relevance": 0.3,
    "clarity": 0.25,
    "transition": 0.1,
}

WEAK_HOOK_SUGGESTION = "Consider using stronger hooks in your topic sentences."


def length_score(sentence: str) -> float:
    """100 inside the 10-25 word band, linear below, -4 per word above."""
    count = len(split_whitespace(sentence))
    if 10 <= count <= 25:
        return 100.0
    if count < 10:
        return (count / 10) * 100
    return max(0.0, 100.0 - (count - 25) * 4)


def hook_strength(sentence: str) -> int:
    """Additive hook signals; the total is not capped at 100."""
    score = 0
    if HOOK_QUESTION.search(sentence):
        score += 25
    if HOOK_STATISTIC.search(sentence):
        score += 20
    if HOOK_QUOTE.search(sentence):
        score += 20
    if HOOK_PRONOUNCEMENT.search(sentence):
        score += 15
    if HOOK_CONTRAST.search(sentence):
        score += 20
    return score


def _content_words(text: str) -> set[str]:
    return {
        word for word in TOPIC_WORD_PATTERN.findall(text.lower()) if word not in STOP_WORDS
    }


def relevance_score(topic_sentence: str, rest: str) -> float:
    if not rest:
        return 0.0
    topic_words = _content_words(topic_sentence)
    if not topic_words:
        return 0.0
    shared = topic_words & _content_words(rest)
    return min(100.0, len(shared) / len(topic_words) * 100)


def count_jargon(sentence: str) -> int:
    lowered = sentence.lower()
    return sum(1 for term in JARGON_TERMS if term in lowered)


def clarity_score(sentence: str) -> float:
    long_words = sum(1 for word in split_whitespace(sentence) if len(word) > 12)
    penalty = long_words * 10
    if PASSIVE_PATTERN.search(sentence):
        penalty += 15
    penalty += sentence.count(",") * 5
    penalty += count_jargon(sentence) * 8
    return float(max(0, 100 - penalty))


def transition_quality(sentence: str, is_first_paragraph: bool) -> int:
    if is_first_paragraph:
        return 100
    lowered = sentence.lower()
    return 100 if any(phrase in lowered for phrase in TOPIC_TRANSITION_PHRASES) else 0


def main_idea_presence(topic_sentence: str, rest: str) -> int:
    topic_tokens = set(split_whitespace(topic_sentence.lower()))
    rest_tokens = set(split_whitespace(rest.lower()))
    return 100 if topic_tokens & rest_tokens else 0


def analyze_paragraph(paragraph: str, index: int) -> TopicSentenceDetail:
    parts = SENTENCE_BOUNDARY_RE.split(paragraph.strip())
    topic = parts[0].strip()
    rest = " ".join(parts[1:]).strip()
    length = length_score(topic)
    hook = hook_strength(topic)
    relevance = relevance_score(topic, rest)
    clarity = clarity_score(topic)
    transition = transition_quality(topic, index == 0)
    overall = (
        length * WEIGHTS["length"]
        + hook * WEIGHTS["hook"]
        + relevance * WEIGHTS["relevance"]
        + clarity * WEIGHTS["clarity"]
        + transition * WEIGHTS["transition"]
    )
    return TopicSentenceDetail(
        paragraph_index=index,
        sentence=topic,
        length_score=length,
        hook_strength=hook,
        relevance=relevance,
        clarity=clarity,
        transition_quality=transition,
        main_idea_presence=main_idea_presence(topic, rest),
        coherence=relevance,
        overall=overall,
    )


def analyze_topic_sentences(text: str) -> TopicSentenceReport:
    return topic_sentence_report(paragraphs(text))


def topic_sentence_report(paragraph_list: Sequence[str]) -> TopicSentenceReport:
    details = [analyze_paragraph(p, idx) for idx, p in enumerate(paragraph_list)]
    if not details:
        return TopicSentenceReport(score=0.0, details=(), suggestions=())
    suggestions: List[str] = []
    if safe_mean(d.hook_strength for d in details) < 50:
        suggestions.append(WEAK_HOOK_SUGGESTION)
    return TopicSentenceReport(
        score=safe_mean(d.overall for d in details),
        details=tuple(details),
        suggestions=tuple(suggestions),
    )
