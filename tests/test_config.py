"""Tests for WeatherConfig."""

from __future__ import annotations

import logging

import pytest

from weathercard.config import DEFAULT_BASE_URL, WeatherConfig
from weathercard.domains.weather import Units


def test_defaults() -> None:
    config = WeatherConfig()
    assert config.api_key is None
    assert config.base_url == DEFAULT_BASE_URL
    assert config.default_units is Units.IMPERIAL


def test_from_env() -> None:
    config = WeatherConfig.from_env(
        {
            "OPENWEATHER_API_KEY": "env-key",
            "OPENWEATHER_BASE_URL": "http://localhost:9000/data/",
            "OPENWEATHER_UNITS": "Metric",
        }
    )
    assert config.api_key == "env-key"
    assert config.base_url == "http://localhost:9000/data"
    assert config.default_units is Units.METRIC


def test_from_env_missing_key_is_allowed() -> None:
    config = WeatherConfig.from_env({"OPENWEATHER_API_KEY": ""})
    assert config.api_key is None


def test_from_env_unknown_units(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        config = WeatherConfig.from_env({"OPENWEATHER_UNITS": "kelvin"})

    assert config.default_units is Units.IMPERIAL
    assert "kelvin" in caplog.text


def test_from_process_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENWEATHER_API_KEY", "process-key")
    monkeypatch.delenv("OPENWEATHER_UNITS", raising=False)
    monkeypatch.delenv("OPENWEATHER_BASE_URL", raising=False)

    config = WeatherConfig.from_env()

    assert config.api_key == "process-key"
    assert config.default_units is Units.IMPERIAL
