"""
Tests for environment configuration accessors.
"""

from __future__ import annotations

import pytest

from thedog.utils import config


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    # Keep a developer's .env out of the tests
    monkeypatch.setattr(config, "load_config", lambda: None)
    for key in ("DOG_API_KEY", "DOG_API_BASE_URL", "DOG_API_TIMEOUT", "THEDOG_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_api_key_required() -> None:
    with pytest.raises(ValueError, match="DOG_API_KEY"):
        config.dog_api_key()


def test_api_key_blank_is_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOG_API_KEY", "   ")
    with pytest.raises(ValueError):
        config.dog_api_key()


def test_api_key_trimmed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOG_API_KEY", " live_abc ")
    assert config.dog_api_key() == "live_abc"


def test_base_url_default_and_override(monkeypatch: pytest.MonkeyPatch) -> None:
    assert config.dog_api_base_url() == "https://api.thedogapi.com/v1"
    monkeypatch.setenv("DOG_API_BASE_URL", "http://localhost:8080/v1/")
    assert config.dog_api_base_url() == "http://localhost:8080/v1"


@pytest.mark.parametrize("raw,expected", [("", 60), ("15", 15), ("abc", 60), ("0", 60), ("-3", 60)])
def test_timeout(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int) -> None:
    monkeypatch.setenv("DOG_API_TIMEOUT", raw)
    assert config.dog_api_timeout() == expected


def test_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert config.log_level() == "INFO"
    monkeypatch.setenv("THEDOG_LOG_LEVEL", "debug")
    assert config.log_level() == "DEBUG"
