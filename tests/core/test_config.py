from __future__ import annotations

import pytest

from console_quiz.core.config import Settings, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for name in (
        "LOG_LEVEL",
        "LOG_FORMAT",
        "QUIZ_SHUFFLE_QUESTIONS",
        "QUIZ_SHUFFLE_OPTIONS",
        "QUIZ_RANDOM_SEED",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_defaults() -> None:
    settings = Settings()

    assert settings.log_level == "WARNING"
    assert settings.log_format == "json"
    assert settings.shuffle_questions is True
    assert settings.shuffle_options is True
    assert settings.random_seed is None


def test_settings_read_from_env(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("QUIZ_SHUFFLE_QUESTIONS", "false")
    monkeypatch.setenv("QUIZ_SHUFFLE_OPTIONS", "0")
    monkeypatch.setenv("QUIZ_RANDOM_SEED", "1234")

    settings = Settings()

    assert settings.log_level == "DEBUG"
    assert settings.shuffle_questions is False
    assert settings.shuffle_options is False
    assert settings.random_seed == 1234


def test_settings_read_from_env_file(tmp_path) -> None:
    (tmp_path / ".env").write_text("QUIZ_SHUFFLE_OPTIONS=false\n", encoding="utf-8")

    assert Settings().shuffle_options is False


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
