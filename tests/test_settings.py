"""Tests for environment settings validation."""

from __future__ import annotations

import pytest

from src.config.settings import Settings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TELEGRAM_BOT_TOKEN", "LOG_LEVEL", "BOT_REPLY_INDENT"):
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")

    settings = Settings(_env_file=None)

    assert settings.telegram_bot_token == "123:abc"
    assert settings.log_level == "INFO"
    assert settings.bot_reply_indent == 2


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert Settings(_env_file=None).log_level == "DEBUG"


@pytest.mark.parametrize(
    ("name", "value"),
    [("TELEGRAM_BOT_TOKEN", "   "), ("LOG_LEVEL", "chatty"), ("BOT_REPLY_INDENT", "12")],
)
def test_invalid_settings_raise_runtime_error(
        monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    monkeypatch.setenv(name, value)

    with pytest.raises(RuntimeError, match="Invalid environment configuration"):
        load_settings()
