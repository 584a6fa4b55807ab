"""Configuration for the weather client."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .domains.weather import Units

_LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"

ENV_API_KEY = "OPENWEATHER_API_KEY"
ENV_BASE_URL = "OPENWEATHER_BASE_URL"
ENV_UNITS = "OPENWEATHER_UNITS"


@dataclass(frozen=True)
class WeatherConfig:
    """Settings for WeatherHttpClient.

    A missing api_key is allowed here. Lookups report it as a
    WeatherConfigurationError instead of failing at startup.
    """

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    default_units: Units = Units.IMPERIAL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> WeatherConfig:
        """Build a config from OPENWEATHER_* environment variables."""
        env = os.environ if environ is None else environ

        units_value = env.get(ENV_UNITS, Units.IMPERIAL.value).strip().lower()
        try:
            units = Units(units_value)
        except ValueError:
            _LOGGER.warning(
                "Unknown %s value %r, using %s",
                ENV_UNITS,
                units_value,
                Units.IMPERIAL.value,
            )
            units = Units.IMPERIAL

        return cls(
            api_key=env.get(ENV_API_KEY) or None,
            base_url=(env.get(ENV_BASE_URL) or DEFAULT_BASE_URL).rstrip("/"),
            default_units=units,
        )
