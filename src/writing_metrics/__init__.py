"""
writing_metrics package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import WritingMetricsConfig, config_from_dict, config_from_yaml, load_config
from .context import classify_context
from .engine import analyze_corpus, analyze_document, overall_writing_score
from .models import Document, DocumentAnalysis
from .suggestions import generate_smart_suggestions, generate_suggestions

__all__ = [
    "WritingMetricsConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "Document",
    "DocumentAnalysis",
    "analyze_document",
    "analyze_corpus",
    "overall_writing_score",
    "classify_context",
    "generate_suggestions",
    "generate_smart_suggestions",
]

__version__ = "0.1.0"
