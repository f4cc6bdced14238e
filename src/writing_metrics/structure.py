from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence

from .lexical import vocabulary_diversity
from .lexicons import (
    CASUAL_TONE_PATTERN,
    COMPLEX_PHRASES,
    COMPOUND_COMPLEX_PATTERN,
    CONCLUSION_PATTERN,
    COORDINATOR_PATTERN,
    FORMAL_TONE_PATTERN,
    HEADING_PATTERN,
    IDEAL_STRUCTURE_MIX,
    INTRODUCTION_PATTERN,
    LIST_PATTERN,
    OPENING_CATEGORY_PATTERNS,
    PASSIVE_PATTERN,
    PERFECT_PASSIVE_PATTERN,
    SIMPLE_SENTENCE_PATTERN,
    SUBORDINATOR_PATTERN,
)
from .models import (
    AdvancedWritingInsights,
    KeywordCount,
    LengthDistribution,
    LengthVariety,
    OpeningCategory,
    OpeningSummary,
    OutlineEntry,
    RhythmSummary,
    SentenceType,
    SentenceVariety,
    StructureProfile,
    StructureVariety,
    StyleProfile,
    Tone,
    VocabularyDiversity,
    WordCount,
)
from .scoring import population_std_dev, round_half_up, round_int, safe_mean
from .tokenization import (
    SENTENCE_SPLIT_PATTERN,
    paragraphs,
    sentences,
    split_whitespace,
    words,
)


def classify_sentence(sentence: str) -> SentenceType | None:
    """
    Classify by conjunction patterns; the first matching type wins in the
    order compoundComplex, complex, compound, simple. Returns None when a
    sentence carries clause punctuation but no conjunction.
    """
    if COMPOUND_COMPLEX_PATTERN.search(sentence):
        return SentenceType.COMPOUND_COMPLEX
    if SUBORDINATOR_PATTERN.search(sentence):
        return SentenceType.COMPLEX
    if COORDINATOR_PATTERN.search(sentence):
        return SentenceType.COMPOUND
    if SIMPLE_SENTENCE_PATTERN.match(sentence):
        return SentenceType.SIMPLE
    return None


def structure_variety_score(counts: Dict[str, int], total: int) -> float:
    """100 minus the total deviation from the ideal sentence-type mix."""
    if total == 0:
        return 0.0
    deviation = sum(
        abs(ideal - counts.get(kind, 0) / total * 100)
        for kind, ideal in IDEAL_STRUCTURE_MIX.items()
    )
    return max(0.0, 100 - deviation)


def opening_category(first_word: str) -> OpeningCategory:
    for category, pattern in OPENING_CATEGORY_PATTERNS:
        if pattern.match(first_word):
            return category
    return OpeningCategory.OTHER


def _length_variety(lengths: Sequence[int]) -> LengthVariety:
    average = sum(lengths) / len(lengths)
    std_dev = population_std_dev(lengths)
    return LengthVariety(
        score=min(100.0, std_dev / average * 100) if average else 0.0,
        average=round_half_up(average, 1),
        shortest=min(lengths),
        longest=max(lengths),
        std_dev=round_half_up(std_dev, 2),
        distribution=LengthDistribution(
            short=sum(1 for n in lengths if n < 10),
            medium=sum(1 for n in lengths if 10 <= n <= 20),
            long=sum(1 for n in lengths if n > 20),
        ),
    )


def _structure_variety(sentence_list: Sequence[str]) -> StructureVariety:
    counts = {kind.value: 0 for kind in SentenceType}
    for sentence in sentence_list:
        kind = classify_sentence(sentence)
        if kind is not None:
            counts[kind.value] += 1
    return StructureVariety(
        score=structure_variety_score(counts, len(sentence_list)), counts=counts
    )


def _opening_summary(sentence_list: Sequence[str]) -> OpeningSummary:
    first_words = [split_whitespace(s)[0] for s in sentence_list]
    categories = [opening_category(word).value for word in first_words]
    unique = len({word.lower() for word in first_words})
    return OpeningSummary(
        score=min(100.0, unique / len(sentence_list) * 100),
        unique_count=unique,
        type_variety=len(set(categories)),
        types=dict(Counter(categories)),
    )


def _rhythm(lengths: Sequence[int]) -> RhythmSummary:
    total = 0.0
    pattern: List[str] = []
    for previous, current in zip(lengths, lengths[1:]):
        total += min(abs(current - previous) * 5, 20)
        if current > previous:
            pattern.append("↑")
        elif current < previous:
            pattern.append("↓")
        else:
            pattern.append("→")
    return RhythmSummary(score=min(100.0, total / len(lengths)), pattern="".join(pattern))


def sentence_variety(text: str) -> SentenceVariety:
    """Length, structure, opening and rhythm variety with a rounded composite."""
    sentence_list = sentences(text)
    if not sentence_list:
        return SentenceVariety()
    lengths = [len(split_whitespace(s)) for s in sentence_list]
    lengths_summary = _length_variety(lengths)
    structure = _structure_variety(sentence_list)
    openings = _opening_summary(sentence_list)
    rhythm = _rhythm(lengths)
    composite = round_int(
        lengths_summary.score * 0.3
        + structure.score * 0.3
        + openings.score * 0.2
        + rhythm.score * 0.2
    )
    return SentenceVariety(
        lengths=lengths_summary,
        structure=structure,
        openings=openings,
        rhythm=rhythm,
        composite=composite,
    )


def paragraph_consistency(text: str) -> float:
    """Percentage of paragraphs within 20% of the mean paragraph length."""
    counts = [len(split_whitespace(p)) for p in paragraphs(text)]
    if not counts:
        return 0.0
    mean_length = sum(counts) / len(counts)
    consistent = sum(1 for n in counts if abs(n - mean_length) <= 0.2 * mean_length)
    return round_half_up(consistent / len(counts) * 100, 1)


def has_introduction(text: str) -> bool:
    return INTRODUCTION_PATTERN.search(text) is not None


def has_conclusion(text: str) -> bool:
    return CONCLUSION_PATTERN.search(text) is not None


def analyze_structure(text: str) -> StructureProfile:
    return StructureProfile(
        section_count=len(HEADING_PATTERN.findall(text)),
        list_count=len(LIST_PATTERN.findall(text)),
        paragraph_word_counts=tuple(len(split_whitespace(p)) for p in paragraphs(text)),
        has_introduction=has_introduction(text),
        has_conclusion=has_conclusion(text),
    )


def count_passive_voice(text: str) -> int:
    return len(PASSIVE_PATTERN.findall(text)) + len(PERFECT_PASSIVE_PATTERN.findall(text))


def repeated_words(
    tokens: Sequence[str], min_length: int = 4, min_count: int = 4, limit: int = 5
) -> tuple[WordCount, ...]:
    """Most frequent long words; ties keep first-seen order."""
    frequency = Counter(token for token in tokens if len(token) >= min_length)
    ranked = sorted(
        ((word, count) for word, count in frequency.items() if count >= min_count),
        key=lambda item: -item[1],
    )
    return tuple(WordCount(word=word, count=count) for word, count in ranked[:limit])


def count_complex_phrases(text: str) -> int:
    lowered = text.lower()
    return sum(1 for phrase in COMPLEX_PHRASES if phrase in lowered)


def detect_tone(text: str) -> Tone:
    formal = len(FORMAL_TONE_PATTERN.findall(text))
    casual = len(CASUAL_TONE_PATTERN.findall(text))
    if formal > casual * 2:
        return Tone.FORMAL
    if casual > formal * 2:
        return Tone.CASUAL
    return Tone.NEUTRAL


def analyze_style(
    text: str,
    long_sentence_words: int = 25,
    repeated_min_length: int = 4,
    repeated_min_count: int = 4,
    repeated_limit: int = 5,
) -> StyleProfile:
    long_sentences = sum(
        1 for s in sentences(text) if len(split_whitespace(s)) > long_sentence_words
    )
    return StyleProfile(
        passive_voice_count=count_passive_voice(text),
        repeated_words=repeated_words(
            words(text), repeated_min_length, repeated_min_count, repeated_limit
        ),
        long_sentence_count=long_sentences,
        complex_phrase_count=count_complex_phrases(text),
        tone=detect_tone(text),
    )


def opening_sentence_strength(paragraph: str) -> float:
    """
    Score the first sentence of a paragraph by length alone.

    8 to 20 words scores 100; shorter openers scale up linearly to 8 words and
    longer ones lose 10 points per extra word, bottoming out at 0.
    """
    first_sentence = SENTENCE_SPLIT_PATTERN.split(paragraph)[0]
    count = len(split_whitespace(first_sentence))
    if 8 <= count <= 20:
        return 100.0
    if count < 8:
        return count / 8 * 100
    return max(0.0, 100 - (count - 20) / 10 * 100)


def advanced_writing_insights(text: str) -> AdvancedWritingInsights:
    sentence_list = sentences(text)
    lengths = [len(split_whitespace(s)) for s in sentence_list]
    if not lengths:
        return AdvancedWritingInsights(
            vocabulary=VocabularyDiversity(
                basic=0.0, moving=0.0, root=0.0, unique_words=0, total_words=0
            ),
            longest_sentence=0,
            sentence_variety_score=0.0,
            paragraph_consistency=0.0,
            topic_sentence_strength=0,
            sentence_opening_variety=0.0,
        )

    mean_length = sum(lengths) / len(lengths)
    first_words = {split_whitespace(s)[0].lower() for s in sentence_list}
    return AdvancedWritingInsights(
        vocabulary=vocabulary_diversity(text),
        longest_sentence=max(lengths),
        sentence_variety_score=round_half_up(population_std_dev(lengths) / mean_length, 2),
        paragraph_consistency=paragraph_consistency(text),
        topic_sentence_strength=round_int(
            safe_mean(opening_sentence_strength(p) for p in paragraphs(text))
        ),
        sentence_opening_variety=round_half_up(len(first_words) / len(sentence_list) * 100, 1),
    )


def top_keywords(text: str, limit: int = 20) -> tuple[KeywordCount, ...]:
    frequency = Counter(token for token in words(text) if len(token) > 3)
    ranked = sorted(frequency.items(), key=lambda item: -item[1])[:limit]
    return tuple(KeywordCount(word=word, count=count) for word, count in ranked)


def extract_outline(text: str) -> tuple[OutlineEntry, ...]:
    """Markdown headings with their nesting level."""
    return tuple(
        OutlineEntry(level=len(match.group(1)), title=match.group(2).strip())
        for match in HEADING_PATTERN.finditer(text)
    )
