import pytest

from writing_metrics.models import OpeningCategory, SentenceType, Tone, WordCount
from writing_metrics.structure import (
    advanced_writing_insights,
    analyze_structure,
    analyze_style,
    classify_sentence,
    count_passive_voice,
    detect_tone,
    extract_outline,
    opening_category,
    opening_sentence_strength,
    paragraph_consistency,
    repeated_words,
    sentence_variety,
    structure_variety_score,
    top_keywords,
)
from writing_metrics.tokenization import words


def test_classify_sentence_priority():
    assert (
        classify_sentence("I ran and I hid because it rained")
        is SentenceType.COMPOUND_COMPLEX
    )
    assert classify_sentence("I stayed home because it rained") is SentenceType.COMPLEX
    assert classify_sentence("I ran, and I fell") is SentenceType.COMPOUND
    assert classify_sentence("I ran home") is SentenceType.SIMPLE
    assert classify_sentence("Wait, then go") is None


def test_classify_sentence_requires_coordinator_before_subordinator():
    """A subordinate clause followed by a coordinator is only complex."""
    assert classify_sentence("we stayed because it rained and snowed") is SentenceType.COMPLEX
    assert classify_sentence("it rained and we stayed in when it snowed") is (
        SentenceType.COMPOUND_COMPLEX
    )


def test_classify_sentence_is_case_sensitive():
    assert classify_sentence("AND IF so") is SentenceType.SIMPLE
    assert classify_sentence("Because it rained, I stayed home") is None


def test_structure_variety_score_matches_ideal_mix():
    counts = {"simple": 3, "compound": 3, "complex": 3, "compoundComplex": 1}
    assert structure_variety_score(counts, 10) == pytest.approx(100.0)
    assert structure_variety_score({"simple": 2}, 2) == 0.0
    assert structure_variety_score({}, 0) == 0.0


def test_sentence_variety_for_uniform_sentences():
    variety = sentence_variety("The cat sat. The cat ran.")
    assert variety.lengths.average == 3.0
    assert variety.lengths.score == 0.0
    assert variety.lengths.distribution.short == 2
    assert variety.structure.counts["simple"] == 2
    assert variety.openings.score == 50.0
    assert variety.openings.types == {"subject": 2}
    assert variety.rhythm.pattern == "→"
    assert variety.composite == 10


def test_sentence_variety_without_sentences_is_zero():
    assert sentence_variety("").composite == 0


def test_opening_category_fallback():
    assert opening_category("Suddenly") is OpeningCategory.ADVERB
    assert opening_category("Could") is OpeningCategory.VERB
    assert opening_category("Zebras") is OpeningCategory.OTHER


def test_paragraph_consistency():
    assert paragraph_consistency("a b c\n\nd e f") == 100.0
    assert paragraph_consistency("a b c\n\nd e f\n\ng h i j k l m n o p") == 0.0
    assert paragraph_consistency("") == 0.0


def test_analyze_structure_detects_sections_lists_and_conclusion():
    text = "# Title\n\nIntro text.\n\n- one\n- two\n\n## Sub\n\nIn conclusion, done."
    profile = analyze_structure(text)
    assert profile.section_count == 2
    assert profile.list_count == 2
    assert profile.paragraph_word_counts == (2, 2, 4, 2, 3)
    assert profile.has_conclusion is True
    assert profile.has_introduction is False


def test_repeated_words_keep_first_seen_order_on_ties():
    text = " ".join(
        ["alpha"] * 4
        + ["beta"] * 4
        + ["cat"] * 10
        + ["gamma"] * 4
        + ["tiny"] * 4
        + ["delta"] * 4
        + ["omega"] * 5
    )
    result = repeated_words(words(text))
    assert [(item.word, item.count) for item in result] == [
        ("omega", 5),
        ("alpha", 4),
        ("beta", 4),
        ("gamma", 4),
        ("tiny", 4),
    ]


def test_single_frequent_word_is_the_only_repeat():
    """In a 50-word text only the word seen five times is reported."""
    fillers = [
        "alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf", "hotel",
        "india", "juliet", "kilo", "lima", "mike", "november", "oscar",
    ]
    text = " ".join(["system"] * 5 + [word for word in fillers for _ in range(3)]) + "."
    assert len(words(text)) == 50
    assert analyze_style(text).repeated_words == (WordCount(word="system", count=5),)


def test_style_profile_counts():
    style = analyze_style(
        "The tests were completed. " + " ".join(["word"] * 26) + ". "
        "We did this in order to win."
    )
    assert style.passive_voice_count == 1
    assert style.long_sentence_count == 1
    assert style.complex_phrase_count == 1
    assert count_passive_voice("It has been tested.") == 2


def test_detect_tone_two_to_one_rule():
    assert detect_tone("Therefore it works. Moreover it scales.") is Tone.FORMAL
    assert detect_tone("Basically it is okay stuff.") is Tone.CASUAL
    assert detect_tone("Therefore it is okay.") is Tone.NEUTRAL
    assert detect_tone("The cat sat. The cat ran.") is Tone.NEUTRAL


def test_advanced_writing_insights():
    insights = advanced_writing_insights("The cat sat. The cat ran.")
    assert insights.longest_sentence == 3
    assert insights.sentence_variety_score == 0.0
    assert insights.paragraph_consistency == 100.0
    assert insights.sentence_opening_variety == 50.0
    assert insights.topic_sentence_strength == 38
    assert insights.vocabulary.total_words == 6


def test_opening_sentence_strength_bands():
    assert opening_sentence_strength("One two three four five six seven eight nine. Ten.") == 100.0
    assert opening_sentence_strength("Two words. Then a much longer sentence follows here.") == 25.0
    assert opening_sentence_strength(" ".join(["word"] * 25) + ".") == 50.0
    assert opening_sentence_strength(" ".join(["word"] * 40) + ".") == 0.0


def test_topic_sentence_strength_averages_paragraph_openers():
    text = (
        "One two three four five six seven eight nine. Ten.\n\n"
        "Two words. Then a much longer sentence follows here."
    )
    assert advanced_writing_insights(
        "One two three four five six seven eight nine. Ten."
    ).topic_sentence_strength == 100
    assert advanced_writing_insights(text).topic_sentence_strength == 63


def test_advanced_writing_insights_without_sentences():
    insights = advanced_writing_insights("")
    assert insights.longest_sentence == 0
    assert insights.vocabulary.basic == 0.0


def test_keywords_and_outline():
    keywords = top_keywords("Data data data model model code is")
    assert [(kw.word, kw.count) for kw in keywords] == [
        ("data", 3),
        ("model", 2),
        ("code", 1),
    ]
    outline = extract_outline("# A\n## B\ntext\n### C")
    assert [(entry.level, entry.title) for entry in outline] == [(1, "A"), (2, "B"), (3, "C")]
