from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence, cast

import pandas as pd

from .config import WritingMetricsConfig
from .engine import analyze_corpus
from .models import Document, DocumentAnalysis

LOGGER = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "doc_id",
    "word_count",
    "sentence_count",
    "paragraph_count",
    "readability_score",
    "grade",
    "readability_level",
    "overall_score",
    "sentiment",
    "sentiment_score",
    "lexical_density",
    "vocabulary_basic",
    "sentence_variety",
    "primary_type",
    "tone",
    "purpose",
    "passive_voice_count",
    "argument_impact",
    "suggestion_count",
    "fault_count",
]


def report_row(doc_id: str, analysis: DocumentAnalysis) -> Dict[str, Any]:
    """Headline metrics of one analysis as a flat record."""
    return {
        "doc_id": doc_id,
        "word_count": analysis.statistics.word_count,
        "sentence_count": analysis.statistics.sentence_count,
        "paragraph_count": analysis.statistics.paragraph_count,
        "readability_score": analysis.readability.score,
        "grade": analysis.readability.grade,
        "readability_level": analysis.readability.level.value,
        "overall_score": analysis.overall_score,
        "sentiment": analysis.sentiment.label.value,
        "sentiment_score": analysis.sentiment.normalized_score,
        "lexical_density": analysis.lexical_density.density,
        "vocabulary_basic": analysis.vocabulary.basic,
        "sentence_variety": analysis.sentence_variety.composite,
        "primary_type": analysis.context.primary_type.value,
        "tone": analysis.style.tone.value,
        "purpose": analysis.context.purpose.value,
        "passive_voice_count": analysis.style.passive_voice_count,
        "argument_impact": analysis.argument.impact,
        "suggestion_count": len(analysis.suggestions),
        "fault_count": len(analysis.faults),
    }


def build_report(
    documents: Sequence[Document], config: WritingMetricsConfig | None = None
) -> pd.DataFrame:
    """Analyze documents and tabulate one row per document, sorted by doc_id."""
    results = analyze_corpus(documents, config)
    rows: List[Dict[str, Any]] = [
        report_row(doc_id, analysis) for doc_id, analysis in sorted(results.items())
    ]
    return cast(Any, pd.DataFrame(rows, columns=REPORT_COLUMNS))


def write_report(frame: pd.DataFrame, path: str | Path) -> Path:
    """Write the report as CSV or parquet depending on the file suffix."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.suffix.lower() == ".csv":
        frame.to_csv(output_path, index=False)
    elif output_path.suffix.lower() == ".parquet":
        frame.to_parquet(output_path, index=False)
    else:
        raise ValueError(f"Unsupported report format '{output_path.suffix}'.")
    LOGGER.info("Wrote %d report rows to %s", len(frame), output_path)
    return output_path
