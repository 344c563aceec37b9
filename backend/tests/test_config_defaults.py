"""Test configuration defaults for the API server."""

from __future__ import annotations

import pytest

from team_api.config import DEFAULT_PORT, Settings, SettingsError, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("HOST", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_default_settings_listen_on_port_3000() -> None:
    settings = Settings.from_env()

    assert settings.port == DEFAULT_PORT == 3000
    assert settings.host == "0.0.0.0"


@pytest.mark.parametrize("raw", ["", "   "])
def test_blank_port_falls_back_to_default(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("PORT", raw)
    assert Settings.from_env().port == DEFAULT_PORT


@pytest.mark.parametrize("raw,expected", [("8080", 8080), (" 4000 ", 4000), ("0", 0)])
def test_port_is_read_from_env(monkeypatch, raw: str, expected: int) -> None:
    monkeypatch.setenv("PORT", raw)
    assert Settings.from_env().port == expected


@pytest.mark.parametrize("raw", ["abc", "80.5", "-1", "65536"])
def test_invalid_port_raises(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("PORT", raw)
    with pytest.raises(SettingsError, match="PORT"):
        Settings.from_env()


def test_host_is_read_from_env(monkeypatch) -> None:
    monkeypatch.setenv("HOST", "127.0.0.1")
    assert Settings.from_env().host == "127.0.0.1"


def test_get_settings_is_cached(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "5000")
    first = get_settings()
    monkeypatch.setenv("PORT", "6000")
    assert get_settings() is first
    assert first.port == 5000
