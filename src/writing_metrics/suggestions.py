from __future__ import annotations

import re
from types import MappingProxyType
from typing import List, Mapping, Tuple

from .config import SuggestionSettings
from .models import (
    ContextPurpose,
    ContextStructure,
    ContextTone,
    DocumentAnalysis,
    DocumentContext,
    DocumentType,
    Suggestion,
)

INTRO_TEMPLATES: Mapping[DocumentType, str] = MappingProxyType(
    {
        DocumentType.TECHNICAL: (
            "## Technical Overview\n"
            "This document outlines the technical specifications and implementation "
            "details of [System Name]. Key areas covered include:\n"
            "- Architecture overview\n- System components\n- Implementation approach"
        ),
        DocumentType.ACADEMIC: (
            "## Research Abstract\n"
            "This study investigates [Research Topic] through [Methodology]. "
            "The research addresses:\n"
            "- Current gaps in literature\n- Methodology approach\n"
            "- Key findings and implications"
        ),
        DocumentType.BUSINESS: (
            "## Executive Summary\n"
            "This proposal presents a comprehensive business strategy for "
            "[Project/Initiative]. Focus areas include:\n"
            "- Market opportunity\n- Strategic approach\n- Expected outcomes"
        ),
        DocumentType.CREATIVE: (
            "## Story Synopsis\n"
            "This narrative explores [Theme/Concept] through [Style/Approach]. "
            "Key elements include:\n"
            "- Main character arc\n- Central conflict\n- Theme development"
        ),
    }
)

CONTENT_TEMPLATES: Mapping[DocumentType, Tuple[str, ...]] = MappingProxyType(
    {
        DocumentType.TECHNICAL: (
            "## Implementation Considerations\n- Performance optimization strategies\n"
            "- Scalability approaches\n- Security considerations\n- Testing methodology",
            "## System Architecture\n1. Component interactions\n2. Data flow\n"
            "3. Integration points\n4. Deployment strategy",
        ),
        DocumentType.ACADEMIC: (
            "## Methodology\n- Research design\n- Data collection approach\n"
            "- Analysis framework\n- Validation methods",
            "## Literature Review\n1. Current state of research\n2. Theoretical framework\n"
            "3. Research gaps\n4. Contribution to field",
        ),
        DocumentType.BUSINESS: (
            "## Market Analysis\n- Target market segmentation\n- Competitive landscape\n"
            "- Growth opportunities\n- Risk assessment",
            "## Implementation Strategy\n1. Phase 1: [Timeline]\n2. Phase 2: [Timeline]\n"
            "3. Resource allocation\n4. Success metrics",
        ),
        DocumentType.CREATIVE: (
            "## Character Development\n- Psychological profile\n- Character relationships\n"
            "- Growth arc\n- Conflict resolution",
            "## Plot Structure\n1. Inciting incident\n2. Rising action\n3. Climax\n"
            "4. Resolution approach",
        ),
        DocumentType.SCIENTIFIC: (
            "## Methodology\n- Experimental design\n- Variables and controls\n"
            "- Data collection protocol\n- Statistical analysis approach",
            "## Results and Discussion\n1. Primary findings\n2. Statistical significance\n"
            "3. Implications\n4. Future research directions",
        ),
        DocumentType.LEGAL: (
            "## Legal Framework\n- Applicable regulations\n- Precedent cases\n"
            "- Statutory requirements\n- Compliance considerations",
            "## Risk Assessment\n1. Potential liabilities\n2. Mitigation strategies\n"
            "3. Recommended safeguards\n4. Compliance timeline",
        ),
        DocumentType.EDUCATIONAL: (
            "## Learning Objectives\n- Key concepts\n- Skill development goals\n"
            "- Assessment criteria\n- Practice exercises",
            "## Module Structure\n1. Prerequisite knowledge\n2. Core content sections\n"
            "3. Interactive elements\n4. Assessment methods",
        ),
    }
)

PASSIVE_VOICE_TEMPLATE = (
    "## Style Enhancement\n"
    "Consider revising passive voice constructions for more direct impact:\n"
    "- [Example passive sentence]\n"
    "- Alternative active voice: [Example active sentence]"
)
TONE_TEMPLATE = (
    "## Tone Adjustment\n"
    "Consider adopting a more professional tone:\n"
    "- Replace casual phrases with formal alternatives\n"
    "- Maintain consistent terminology\n"
    "- Use precise language"
)
ARGUMENT_TEMPLATE = (
    "## Argument Strength\n"
    "Enhance your arguments by:\n"
    "- Using varied vocabulary for key concepts\n"
    "- Adding supporting evidence\n"
    "- Strengthening transitions between points"
)
READABILITY_TIPS: Mapping[ContextPurpose, str] = MappingProxyType(
    {
        ContextPurpose.INFORMATIVE: (
            "- Break into smaller, focused paragraphs\n"
            "- Add subheadings for clarity\n"
            "- Use bullet points for key information"
        ),
        ContextPurpose.PERSUASIVE: (
            "- Strengthen topic sentences\n"
            "- Add concrete examples\n"
            "- Use impactful statistics"
        ),
        ContextPurpose.INSTRUCTIONAL: (
            "- Break into step-by-step format\n"
            "- Add practical examples\n"
            "- Include review points"
        ),
    }
)

HEADING_MARKER_RE = re.compile(r"^##", re.MULTILINE)
DASH_BULLET_RE = re.compile(r"^-", re.MULTILINE)
LIST_ITEM_RE = re.compile(r"\n(?:-|\d+\.)\s+([^\n]+)")


def generate_suggestions(
    text: str,
    analysis: DocumentAnalysis,
    settings: SuggestionSettings | None = None,
) -> Tuple[Suggestion, ...]:
    """Ordered rule-based suggestions; each rule adds at most one entry."""
    settings = settings or SuggestionSettings()
    suggestions: List[Suggestion] = []
    if analysis.readability.score < settings.readability_threshold:
        suggestions.append(
            Suggestion(
                icon="fa-book-reader",
                title="Improve Readability",
                content=(
                    "Use shorter sentences and simpler words to make your content "
                    "more accessible."
                ),
            )
        )
    if not analysis.structure.has_introduction:
        suggestions.append(
            Suggestion(
                icon="fa-paragraph",
                title="Add Introduction",
                content="Start with a clear introduction to set context for your readers.",
            )
        )
    if analysis.style.passive_voice_count > settings.passive_voice_limit:
        suggestions.append(
            Suggestion(
                icon="fa-pen-fancy",
                title="Use Active Voice",
                content="Use more active voice to make your writing more direct.",
            )
        )
    # Case-sensitive: only the lowercase word suppresses this rule.
    if (
        analysis.statistics.word_count < settings.expand_content_min_words
        and "conclusion" not in text
    ):
        suggestions.append(
            Suggestion(
                icon="fa-expand-arrows-alt",
                title="Expand Content",
                content="Add more detail or examples to fully develop your ideas.",
            )
        )
    if analysis.readability.grade > settings.grade_ceiling:
        suggestions.append(
            Suggestion(
                icon="fa-edit",
                title="Simplify Language",
                content=(
                    "Your document appears complex. Consider using simpler words and "
                    "shorter sentences for better accessibility."
                ),
            )
        )
    return tuple(suggestions)


def introduction_template(document_type: DocumentType) -> str:
    return INTRO_TEMPLATES.get(document_type, INTRO_TEMPLATES[DocumentType.TECHNICAL])


def content_template(context: DocumentContext, word_count: int) -> str:
    """
    Pick one domain template and reshape it for tone, purpose and complexity.

    The template index is derived from the word count so the same document
    always receives the same template.
    """
    templates = CONTENT_TEMPLATES[context.primary_type]
    template = templates[word_count % len(templates)]
    if context.tone is ContextTone.FORMAL and context.purpose is ContextPurpose.PERSUASIVE:
        template = HEADING_MARKER_RE.sub("### Recommendation:", template)
    elif context.purpose is ContextPurpose.INSTRUCTIONAL:
        template = DASH_BULLET_RE.sub("✓", template)
    if context.complexity < 50 or context.sentence_length > 25:
        template = LIST_ITEM_RE.sub(lambda match: "\n• " + match.group(1), template)
    return template


def style_templates(
    analysis: DocumentAnalysis, settings: SuggestionSettings
) -> List[str]:
    context = analysis.context
    templates: List[str] = []
    if (
        analysis.style.passive_voice_count > settings.passive_voice_limit
        and context.tone is not ContextTone.FORMAL
    ):
        templates.append(PASSIVE_VOICE_TEMPLATE)
    if context.tone is ContextTone.CASUAL and context.purpose is ContextPurpose.INFORMATIVE:
        templates.append(TONE_TEMPLATE)
    if (
        context.structure is ContextStructure.ARGUMENTATIVE
        and len(analysis.style.repeated_words) > 3
    ):
        templates.append(ARGUMENT_TEMPLATE)
    if analysis.readability.score < settings.readability_threshold:
        templates.append(
            "## Readability Improvements\n"
            "- Simplify sentences (current average: "
            f"{analysis.readability.avg_sentence_length} words)\n"
            f"{READABILITY_TIPS[context.purpose]}"
        )
    return templates


def complexity_level(complexity: float) -> str:
    if complexity < 50:
        return "Basic"
    if complexity < 75:
        return "Intermediate"
    return "Advanced"


def format_smart_suggestions(sections: List[str], context: DocumentContext) -> str:
    header = (
        "\n# Enhanced Content Suggestions\n"
        "_Analysis Results:_\n"
        f"- Document Type: {context.primary_type.value}\n"
        f"- Writing Style: {context.tone.value}\n"
        f"- Primary Purpose: {context.purpose.value}\n"
        f"- Complexity Level: {complexity_level(context.complexity)}\n"
    )
    return header + "\n\n".join(sections)


def generate_smart_suggestions(
    analysis: DocumentAnalysis, settings: SuggestionSettings | None = None
) -> str:
    """Context-aware markdown suggestions for continuing the document."""
    settings = settings or SuggestionSettings()
    context = analysis.context
    sections: List[str] = []
    if (
        not analysis.structure.has_introduction
        and context.scores[context.primary_type.value] > settings.intro_domain_threshold
    ):
        sections.append(introduction_template(context.primary_type))
    sections.append(content_template(context, analysis.statistics.word_count))
    if (
        analysis.style.passive_voice_count > settings.passive_voice_limit
        or analysis.readability.score < settings.readability_threshold
    ):
        sections.extend(style_templates(analysis, settings))
    return format_smart_suggestions(sections, context)
