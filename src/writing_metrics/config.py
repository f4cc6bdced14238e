from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class SuggestionSettings:
    """Thresholds for the suggestion rule engine."""

    readability_threshold: float = 60.0
    passive_voice_limit: int = 3
    expand_content_min_words: int = 300
    grade_ceiling: float = 10.0
    intro_domain_threshold: float = 5.0


@dataclass(slots=True)
class WritingMetricsConfig:
    """Configuration options for the analysis engine and CLI."""

    reading_words_per_minute: float = 238.0
    long_sentence_words: int = 25
    repeated_word_min_length: int = 4
    repeated_word_min_count: int = 4
    repeated_word_limit: int = 5
    keyword_limit: int = 20
    parallel_workers: int = 1
    suggestions: SuggestionSettings = field(default_factory=SuggestionSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {item.name for item in fields(WritingMetricsConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "suggestions" in data:
        value = data["suggestions"]
        if isinstance(value, SuggestionSettings):
            kwargs["suggestions"] = value
        elif isinstance(value, Mapping):
            kwargs["suggestions"] = _build_suggestion_settings(value)
        else:
            kwargs.pop("suggestions")
    return kwargs


def _build_suggestion_settings(data: Mapping[str, Any]) -> SuggestionSettings:
    allowed = {item.name for item in fields(SuggestionSettings)}
    filtered = {key: data[key] for key in data if key in allowed}
    return SuggestionSettings(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> WritingMetricsConfig:
    """Build a WritingMetricsConfig from a dictionary-like input."""
    if data is None:
        return WritingMetricsConfig()
    return WritingMetricsConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> WritingMetricsConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> WritingMetricsConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return WritingMetricsConfig()
    return config_from_yaml(path)
