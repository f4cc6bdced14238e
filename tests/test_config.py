from pathlib import Path

import pytest

from writing_metrics.config import (
    SuggestionSettings,
    WritingMetricsConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_config_from_dict_ignores_unknown_keys():
    cfg = config_from_dict(
        {
            "long_sentence_words": 30,
            "unknown": 1,
            "suggestions": {"passive_voice_limit": 5, "bogus": 2},
        }
    )
    assert cfg.long_sentence_words == 30
    assert cfg.suggestions.passive_voice_limit == 5
    assert cfg.suggestions.readability_threshold == 60.0


def test_config_from_dict_accepts_settings_instance():
    settings = SuggestionSettings(grade_ceiling=12.0)
    cfg = config_from_dict({"suggestions": settings})
    assert cfg.suggestions is settings
    assert config_from_dict(None) == WritingMetricsConfig()


def test_config_from_yaml_round_trip(tmp_path: Path):
    """YAML files override defaults, including nested suggestion settings."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "parallel_workers: 3\nsuggestions:\n  expand_content_min_words: 150\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.parallel_workers == 3
    assert cfg.suggestions.expand_content_min_words == 150


def test_config_from_yaml_requires_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(ValueError):
        config_from_yaml(path)


def test_empty_yaml_gives_defaults(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert config_from_yaml(path) == WritingMetricsConfig()


def test_to_dict_nests_suggestion_settings():
    payload = WritingMetricsConfig().to_dict()
    assert payload["reading_words_per_minute"] == 238.0
    assert payload["suggestions"]["grade_ceiling"] == 10.0
    assert load_config(None).to_dict() == payload
