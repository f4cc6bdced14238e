import pytest

from writing_metrics.config import SuggestionSettings
from writing_metrics.context import classify_context
from writing_metrics.engine import analyze_document
from writing_metrics.models import (
    ContextPurpose,
    ContextStructure,
    ContextTone,
    DocumentContext,
    DocumentType,
)
from writing_metrics.suggestions import (
    complexity_level,
    content_template,
    generate_smart_suggestions,
    generate_suggestions,
    introduction_template,
)


def _context(**overrides) -> DocumentContext:
    values = dict(
        primary_type=DocumentType.BUSINESS,
        scores={},
        tone=ContextTone.FORMAL,
        structure=ContextStructure.ARGUMENTATIVE,
        purpose=ContextPurpose.INFORMATIVE,
        complexity=80.0,
        sentence_length=10.0,
        semantic_counts={},
    )
    values.update(overrides)
    return DocumentContext(**values)


def test_classify_context_prefers_weighted_domain():
    context = classify_context(
        "The API function returns data from the database module.",
        complexity=42.0,
        sentence_length=17.5,
    )
    assert context.primary_type is DocumentType.TECHNICAL
    assert context.scores["technical"] == pytest.approx(13.2)
    assert context.complexity == 42.0
    assert context.sentence_length == 17.5


def test_classify_context_ties_resolve_to_first_enumerated():
    context = classify_context("", complexity=0.0, sentence_length=0.0)
    assert context.primary_type is DocumentType.TECHNICAL
    assert context.tone is ContextTone.FORMAL
    assert context.structure is ContextStructure.ARGUMENTATIVE
    assert context.purpose is ContextPurpose.INFORMATIVE
    assert context.semantic_counts["purpose"] == {
        "informative": 0,
        "persuasive": 0,
        "instructional": 0,
    }


def test_business_metrics_count_percentages_and_currency():
    context = classify_context("Revenue grew 15% to $200.", 50.0, 5.0)
    assert context.primary_type is DocumentType.BUSINESS
    assert context.scores["business"] == 4.0


def test_semantic_counts_pick_purpose():
    context = classify_context(
        "Follow each step of the process. This guide explains the method.", 50.0, 5.0
    )
    assert context.purpose is ContextPurpose.INSTRUCTIONAL


def test_basic_suggestions_for_short_text():
    text = "The cat sat. The cat ran."
    titles = [s.title for s in analyze_document(text).suggestions]
    assert titles == ["Add Introduction", "Expand Content"]


def test_expand_content_is_suppressed_by_lowercase_conclusion_only():
    analysis = analyze_document("The cat sat. The cat ran. No conclusion.")
    assert [s.title for s in analysis.suggestions] == ["Add Introduction"]
    capitalised = analyze_document("The cat sat. Conclusion.")
    assert "Expand Content" in [s.title for s in capitalised.suggestions]


def test_suggestion_thresholds_are_configurable():
    analysis = analyze_document("The cat sat. The cat ran.")
    strict = SuggestionSettings(readability_threshold=101.0, expand_content_min_words=1)
    suggestions = generate_suggestions("The cat sat. The cat ran.", analysis, strict)
    assert [s.icon for s in suggestions] == ["fa-book-reader", "fa-paragraph"]


def test_introduction_template_falls_back_to_technical():
    assert introduction_template(DocumentType.LEGAL).startswith("## Technical Overview")
    assert introduction_template(DocumentType.CREATIVE).startswith("## Story Synopsis")


def test_content_template_recommendation_headings():
    template = content_template(_context(purpose=ContextPurpose.PERSUASIVE), word_count=0)
    assert template.startswith("### Recommendation: Market Analysis")


def test_content_template_checkmarks_for_instructions():
    template = content_template(
        _context(tone=ContextTone.CASUAL, purpose=ContextPurpose.INSTRUCTIONAL),
        word_count=0,
    )
    assert "✓ Target market segmentation" in template
    assert "\n- " not in template


def test_content_template_simplifies_lists():
    template = content_template(_context(complexity=40.0), word_count=1)
    assert template.startswith("## Implementation Strategy")
    assert "\n• Phase 1: [Timeline]" in template
    assert "\n1. " not in template


def test_complexity_level_bands():
    assert complexity_level(49.9) == "Basic"
    assert complexity_level(50.0) == "Intermediate"
    assert complexity_level(75.0) == "Advanced"


def test_smart_suggestions_header():
    analysis = analyze_document("The cat sat. The cat ran.")
    output = generate_smart_suggestions(analysis)
    assert output.startswith("\n# Enhanced Content Suggestions\n")
    assert "- Document Type: technical" in output
    assert "- Writing Style: formal" in output
    assert "- Primary Purpose: informative" in output
    assert "- Complexity Level: Advanced" in output
    assert "## Implementation Considerations" in output
    assert "## Technical Overview" not in output


def test_smart_suggestions_add_readability_tips():
    text = (
        "Notwithstanding considerable organisational complexity, interdisciplinary "
        "collaboration necessitates comprehensive institutional accountability "
        "mechanisms, particularly regarding implementation methodology"
    )
    analysis = analyze_document(text)
    output = generate_smart_suggestions(analysis)
    assert "## Readability Improvements" in output
    assert f"current average: {analysis.readability.avg_sentence_length} words" in output
