"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from graphwalk.config import Settings, get_settings


def test_defaults():
    settings = Settings()
    assert settings.floor_char == "."
    assert settings.start_char == "S"
    assert settings.end_char == "E"
    assert settings.connection_separator == ","


def test_markers_must_be_single_characters():
    with pytest.raises(ValidationError):
        Settings(start_char="ST")
    with pytest.raises(ValidationError):
        Settings(connection_separator="")


def test_log_level_normalized():
    assert Settings(log_level="debug").log_level == "DEBUG"
    with pytest.raises(ValidationError):
        Settings(log_level="loud")


def test_env_override(monkeypatch):
    monkeypatch.setenv("END_CHAR", "X")
    assert Settings().end_char == "X"


def test_cors_origins_list():
    assert Settings(debug=True).cors_origins_list == ["*"]
    assert Settings(cors_origins="http://a, http://b").cors_origins_list == [
        "http://a",
        "http://b",
    ]


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
