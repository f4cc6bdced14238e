from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import replace
from typing import Any, Callable, Dict, List, Sequence, Tuple

from .cohesion import analyze_cohesion, argument_metrics
from .config import WritingMetricsConfig
from .context import classify_context
from .lexical import lexical_density, vocabulary_diversity
from .models import (
    AnalyzerFault,
    ComplexityProfile,
    Document,
    DocumentAnalysis,
)
from .openings import analyze_openings
from .readability import (
    analyze_complexity,
    analyze_readability,
    reading_time_distribution,
    text_statistics,
    writing_style_evolution,
)
from .scoring import clamp, round_int
from .sentiment import analyze_sentiment
from .structure import (
    advanced_writing_insights,
    analyze_structure,
    analyze_style,
    sentence_variety,
)
from .suggestions import generate_suggestions
from .topic_sentences import analyze_topic_sentences

LOGGER = logging.getLogger(__name__)

Analyzer = Callable[[str], Any]


def _independent_analyzers(config: WritingMetricsConfig) -> Dict[str, Analyzer]:
    """Analyzers that only depend on the text, keyed by their result field."""
    return {
        "statistics": text_statistics,
        "structure": analyze_structure,
        "style": lambda text: analyze_style(
            text,
            long_sentence_words=config.long_sentence_words,
            repeated_min_length=config.repeated_word_min_length,
            repeated_min_count=config.repeated_word_min_count,
            repeated_limit=config.repeated_word_limit,
        ),
        "sentiment": analyze_sentiment,
        "lexical_density": lexical_density,
        "reading_time": lambda text: reading_time_distribution(
            text, config.reading_words_per_minute
        ),
        "vocabulary": vocabulary_diversity,
        "sentence_variety": sentence_variety,
        "advanced": advanced_writing_insights,
        "writing_style_evolution": writing_style_evolution,
        "cohesion": analyze_cohesion,
        "topic_sentences": analyze_topic_sentences,
        "openings": analyze_openings,
    }


def _run_analyzer(
    name: str, analyzer: Analyzer, text: str
) -> Tuple[Any, AnalyzerFault | None]:
    try:
        return analyzer(text), None
    except Exception as exc:  # noqa: broad-except
        LOGGER.exception("Analyzer %s failed; substituting the empty-text result", name)
        return analyzer(""), AnalyzerFault(analyzer=name, message=str(exc))


def _run_all(
    analyzers: Dict[str, Analyzer], text: str, workers: int
) -> Tuple[Dict[str, Any], List[AnalyzerFault]]:
    results: Dict[str, Any] = {}
    faults: Dict[str, AnalyzerFault] = {}
    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(_run_analyzer, name, analyzer, text): name
                for name, analyzer in analyzers.items()
            }
            for future in as_completed(futures):
                name = futures[future]
                results[name], fault = future.result()
                if fault is not None:
                    faults[name] = fault
    else:
        for name, analyzer in analyzers.items():
            results[name], fault = _run_analyzer(name, analyzer, text)
            if fault is not None:
                faults[name] = fault
    ordered = [faults[name] for name in analyzers if name in faults]
    return results, ordered


def overall_writing_score(readability: float, complexity: ComplexityProfile) -> int:
    """Blend readability with the mean of four complexity sub-scores."""
    complexity_mean = (
        complexity.vocabulary
        + complexity.sentence_length
        + complexity.structure
        + complexity.technical
    ) / 4
    return round_int(clamp((readability + complexity_mean) / 2))


def analyze_document(
    text: str, config: WritingMetricsConfig | None = None
) -> DocumentAnalysis:
    """Run every analyzer over text and compose the document analysis."""
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, not {type(text).__name__}")
    config = config or WritingMetricsConfig()
    LOGGER.debug(
        "Analyzing %d characters with %d worker(s)", len(text), config.parallel_workers
    )

    primary, primary_faults = _run_all(
        {"readability": analyze_readability, "complexity": analyze_complexity}, text, 1
    )
    results, faults = _run_all(
        _independent_analyzers(config), text, config.parallel_workers
    )
    faults = primary_faults + faults

    readability = primary["readability"]
    complexity = primary["complexity"]
    context = classify_context(
        text,
        complexity=complexity.readability,
        sentence_length=readability.avg_sentence_length,
    )
    analysis = DocumentAnalysis(
        readability=readability,
        complexity=complexity,
        argument=argument_metrics(results["cohesion"]),
        context=context,
        overall_score=overall_writing_score(readability.score, complexity),
        suggestions=(),
        faults=tuple(faults),
        **results,
    )
    analysis = replace(
        analysis,
        suggestions=generate_suggestions(text, analysis, config.suggestions),
    )
    LOGGER.debug(
        "Analysis complete: overall=%d type=%s faults=%d",
        analysis.overall_score,
        context.primary_type.value,
        len(faults),
    )
    return analysis


def analyze_corpus(
    documents: Sequence[Document], config: WritingMetricsConfig | None = None
) -> Dict[str, DocumentAnalysis]:
    """Analyze all documents and return the per-document outputs."""
    config = config or WritingMetricsConfig()
    results: Dict[str, DocumentAnalysis] = {}
    for document in documents:
        results[document.doc_id] = analyze_document(document.text, config)
    return results
