"""Unit tests for application settings and logging configuration."""

import logging
from pathlib import Path

from hens_ai.config import Settings, load_settings
from hens_ai.infrastructure.logging.log_config import _parse_level, setup_logging


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-or-env")
    monkeypatch.setenv("DEFAULT_MODEL", "deepseek/deepseek-chat")
    monkeypatch.setenv("WEB_SEARCH", "true")

    settings = load_settings()

    assert settings.openrouter_api_key == "sk-or-env"
    assert settings.default_model == "deepseek/deepseek-chat"
    assert settings.web_search is True
    assert settings.openrouter_timeout is None


def test_load_settings_returns_fresh_instances():
    assert load_settings() is not load_settings()


def test_setup_logging_applies_category_levels():
    settings = Settings(log_level="INFO", log_level_http="ERROR", log_level_openrouter="DEBUG")

    setup_logging(settings)

    assert logging.getLogger("httpx").level == logging.ERROR
    assert logging.getLogger("httpcore").level == logging.ERROR
    assert logging.getLogger("hens_ai").level == logging.DEBUG
    assert logging.getLogger("hens_ai.infrastructure.openrouter").getEffectiveLevel() == logging.DEBUG
    assert logging.getLogger("hens_ai.client").getEffectiveLevel() == logging.DEBUG
    assert logging.getLogger().level == logging.INFO


def test_parse_level_defaults_to_info():
    assert _parse_level("warning") == logging.WARNING
    assert _parse_level("nonsense") == logging.INFO
