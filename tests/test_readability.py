import pytest

from writing_metrics.models import ReadabilityLevel
from writing_metrics.readability import (
    analyze_complexity,
    analyze_readability,
    flesch_kincaid_grade,
    flesch_reading_ease,
    readability_level,
    reading_time_distribution,
    syllable_count,
    text_statistics,
    writing_style_evolution,
)


def test_syllable_count_heuristics():
    assert syllable_count("the") == 1
    assert syllable_count("make") == 1
    assert syllable_count("table") == 2
    assert syllable_count("reading") == 2


def test_syllable_count_never_below_one():
    """Words without vowel clusters still count as one syllable."""
    for word in ["", "brrrrr", "123", "xyz", "rhythm"]:
        assert syllable_count(word) >= 1


def test_single_letter_readability_is_clamped():
    result = analyze_readability("A")
    assert result.score == 100.0
    assert result.level is ReadabilityLevel.VERY_EASY


def test_flesch_formulas_use_fallback_denominators():
    assert flesch_reading_ease(0, 0, 0) == 100.0
    assert flesch_kincaid_grade(0, 0, 0) == pytest.approx(-15.6)
    assert flesch_kincaid_grade(6, 2, 6) == pytest.approx(-2.6)


def test_readability_level_thresholds_are_exclusive():
    assert readability_level(90.0) is ReadabilityLevel.EASY
    assert readability_level(90.1) is ReadabilityLevel.VERY_EASY
    assert readability_level(60.0) is ReadabilityLevel.FAIRLY_DIFFICULT
    assert readability_level(30.0) is ReadabilityLevel.VERY_DIFFICULT


def test_text_statistics_for_short_scenario():
    stats = text_statistics("The cat sat. The cat ran.")
    assert stats.word_count == 6
    assert stats.sentence_count == 2
    assert stats.paragraph_count == 1
    assert stats.char_count == 25
    assert stats.avg_word_length == 4.2
    assert stats.avg_sentence_length == 3.0
    assert stats.avg_syllables_per_word == 1.0


def test_reading_time_defaults_for_empty_text():
    distribution = reading_time_distribution("")
    percentages = [
        distribution.quick.percentage,
        distribution.medium.percentage,
        distribution.thorough.percentage,
    ]
    assert percentages == [0, 0, 0]
    assert distribution.metrics.estimated_minutes == 0


def test_reading_time_buckets_scale_adjusted_time():
    text = " ".join(["word"] * 250) + "."
    distribution = reading_time_distribution(text)
    assert distribution.quick.percentage == 50.0
    assert distribution.medium.percentage == 25.0
    assert distribution.thorough.percentage == 25.0
    assert distribution.quick.seconds < distribution.medium.seconds
    assert distribution.medium.seconds < distribution.thorough.seconds
    assert distribution.metrics.complexity_factor >= 1.0


def test_reading_time_percentages_are_not_normalised():
    """Long texts saturate two buckets, so shares sum to 200 rather than 100."""
    distribution = reading_time_distribution(" ".join(["word"] * 1200) + ".")
    percentages = [
        distribution.quick.percentage,
        distribution.medium.percentage,
        distribution.thorough.percentage,
    ]
    assert percentages == [100.0, 100.0, 0.0]
    assert sum(percentages) != 100
    seconds = [
        distribution.quick.seconds,
        distribution.medium.seconds,
        distribution.thorough.seconds,
    ]
    assert seconds == [318, 454, 590]
    assert sum(seconds) != distribution.medium.seconds


def test_complexity_scores_are_bounded():
    profile = analyze_complexity(
        "Notwithstanding extraordinary circumstances, interdisciplinary "
        "collaboration remains; consequently: everything-everywhere."
    )
    for value in (
        profile.vocabulary,
        profile.sentence_length,
        profile.structure,
        profile.readability,
        profile.technical,
    ):
        assert 0 <= value <= 100
    assert profile.complex_words > 0


def test_writing_style_evolution_skips_short_paragraphs():
    text = "Tiny one.\n\nThis paragraph has enough words.\n\nAnother readable paragraph here."
    series = writing_style_evolution(text)
    assert series.labels == ("Para 2", "Para 3")
    assert all(0 <= value <= 100 for value in series.data)
