"""Tests for configuration helpers."""

import logging

import pytest
from pydantic import ValidationError

from travel_sessions.config import Settings, parse_cors_origins, resolve_log_level


def test_settings_defaults(monkeypatch) -> None:
    for name in ("ENVIRONMENT", "PORT", "LOG_LEVEL", "CORS_ORIGINS", "HOST"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.environment == "development"
    assert settings.port == 3000
    assert settings.log_level == "info"
    assert settings.is_production is False


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("ENVIRONMENT", "production")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.log_level == "debug"
    assert settings.is_production is True


@pytest.mark.parametrize("port", ["0", "70000", "abc"])
def test_settings_reject_invalid_port(monkeypatch, port) -> None:
    monkeypatch.setenv("PORT", port)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_parse_cors_origins() -> None:
    assert parse_cors_origins(None) == ["*"]
    assert parse_cors_origins(" ") == ["*"]
    assert parse_cors_origins("https://a.example, https://b.example") == [
        "https://a.example",
        "https://b.example",
    ]


def test_resolve_log_level() -> None:
    assert resolve_log_level("warn") == logging.WARNING
    assert resolve_log_level("fatal") == logging.CRITICAL
    assert resolve_log_level("trace") == logging.DEBUG
    assert resolve_log_level("unknown") == logging.INFO
