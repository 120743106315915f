"""Tests for application configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ai_writer.infrastructure.config import ApplicationConfig


def test_defaults() -> None:
    config = ApplicationConfig(_env_file=None)

    assert config.suggestion_min_interval_ms == 2000
    assert config.suggestion_min_interval == 2.0
    assert config.history_key == "ai-writer-history"
    assert config.pdf_page_size == "A4"


def test_environment_variables_use_prefix(monkeypatch) -> None:
    monkeypatch.setenv("AI_WRITER_OPENAI_MODEL", "gpt-custom")
    monkeypatch.setenv("AI_WRITER_SUGGESTION_MIN_INTERVAL_MS", "500")
    monkeypatch.setenv("AI_WRITER_LOG_LEVEL", "debug")

    config = ApplicationConfig(_env_file=None)

    assert config.openai_model == "gpt-custom"
    assert config.suggestion_min_interval == 0.5
    assert config.log_level == "DEBUG"


def test_openai_available_follows_api_key() -> None:
    assert ApplicationConfig(openai_api_key="", _env_file=None).openai_available is False
    assert ApplicationConfig(openai_api_key="sk-1", _env_file=None).openai_available is True


@pytest.mark.parametrize(
    "overrides",
    [
        {"log_level": "LOUD"},
        {"log_format": "xml"},
        {"suggestion_min_interval_ms": -1},
        {"pdf_page_size": "A3"},
    ],
)
def test_invalid_values_are_rejected(overrides) -> None:
    with pytest.raises(ValidationError):
        ApplicationConfig(_env_file=None, **overrides)


def test_page_size_is_normalized() -> None:
    assert ApplicationConfig(pdf_page_size="letter", _env_file=None).pdf_page_size == "Letter"


def test_settings_use_model_config() -> None:
    assert "Config" not in vars(ApplicationConfig)
    assert ApplicationConfig.model_config["env_prefix"] == "AI_WRITER_"
    assert ApplicationConfig.model_config["env_file"] == ".env"


def test_environment_lookup_is_case_insensitive(monkeypatch) -> None:
    monkeypatch.setenv("ai_writer_history_key", "my-history")
    assert ApplicationConfig(_env_file=None).history_key == "my-history"
