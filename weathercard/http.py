"""HTTP client for the OpenWeatherMap current weather endpoint."""

from __future__ import annotations

import json
import logging
from typing import Any, Final
from urllib.parse import quote

import aiohttp

from .config import DEFAULT_BASE_URL, WeatherConfig
from .domains.weather import Units, WeatherQuery, WeatherResult
from .errors import (
    WeatherAuthError,
    WeatherConfigurationError,
    WeatherHttpError,
    WeatherNetworkError,
    WeatherNotFoundError,
    WeatherParseError,
    WeatherRateLimitError,
    WeatherValidationError,
)

_LOGGER = logging.getLogger(__name__)

NO_BODY: Final = "(no body)"

NETWORK_ERROR_MESSAGE: Final = (
    "Network error: cannot reach OpenWeatherMap. Check your internet connection."
)
PARSE_ERROR_MESSAGE: Final = "Invalid response format from OpenWeatherMap."
VALIDATION_ERROR_MESSAGE: Final = "Please enter a city name"
CONFIGURATION_ERROR_MESSAGE: Final = "API key not configured"


class WeatherHttpClient:
    """HTTP client wrapper for the current weather endpoint."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_key: str | None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        default_units: Units = Units.IMPERIAL,
    ) -> None:
        self._session = session
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._default_units = default_units

    @classmethod
    def from_config(
        cls, session: aiohttp.ClientSession, config: WeatherConfig
    ) -> WeatherHttpClient:
        return cls(
            session,
            config.api_key,
            base_url=config.base_url,
            default_units=config.default_units,
        )

    @property
    def default_units(self) -> Units:
        return self._default_units

    def _url(self, query: WeatherQuery) -> str:
        return (
            f"{self._base_url}/weather?q={quote(query.city, safe='')}"
            f"&appid={quote(query.api_key, safe='')}&units={query.units.value}"
        )

    @staticmethod
    def _redact(url: str, query: WeatherQuery) -> str:
        return url.replace(quote(query.api_key, safe=""), "***")

    def build_query(self, city: str, units: Units | None = None) -> WeatherQuery:
        """Validate lookup input without touching the network.

        Raises:
            WeatherValidationError: If the city is empty after trimming.
            WeatherConfigurationError: If no API key is configured.
        """
        city = (city or "").strip()
        if not city:
            raise WeatherValidationError(VALIDATION_ERROR_MESSAGE)
        if not self._api_key:
            _LOGGER.warning("Missing OpenWeatherMap API key")
            raise WeatherConfigurationError(CONFIGURATION_ERROR_MESSAGE)
        return WeatherQuery(
            city=city,
            units=units or self._default_units,
            api_key=self._api_key,
        )

    async def fetch_weather(
        self, city: str, units: Units | None = None
    ) -> WeatherResult:
        """Fetch current conditions for a city.

        Args:
            city: City name as typed by the user.
            units: Unit system, defaults to the client's default units.

        Returns:
            WeatherResult parsed from the provider response.

        Raises:
            WeatherError: One subclass per failure kind, see errors.py.
        """
        return await self.fetch_query(self.build_query(city, units))

    async def fetch_query(self, query: WeatherQuery) -> WeatherResult:
        """Perform a single GET for an already validated query."""
        url = self._url(query)
        _LOGGER.debug("Fetching %s", self._redact(url, query))

        try:
            async with self._session.get(url) as resp:
                if not 200 <= resp.status < 300:
                    detail = await _read_error_detail(resp)
                    _LOGGER.debug(
                        "HTTP error %s %s for %r: %s",
                        resp.status,
                        resp.reason,
                        query.city,
                        detail,
                    )
                    raise _http_error(resp.status, resp.reason, detail)

                try:
                    data = await resp.json(content_type=None)
                except (aiohttp.ContentTypeError, ValueError) as err:
                    _LOGGER.debug("Invalid JSON for %r: %s", query.city, err)
                    raise WeatherParseError(PARSE_ERROR_MESSAGE) from err
        except TimeoutError as err:
            _LOGGER.warning("Weather request for %r timed out", query.city)
            raise WeatherNetworkError(NETWORK_ERROR_MESSAGE) from err
        except (aiohttp.ClientError, OSError) as err:
            _LOGGER.warning("Weather request for %r failed: %s", query.city, err)
            raise WeatherNetworkError(NETWORK_ERROR_MESSAGE) from err

        if not isinstance(data, dict):
            _LOGGER.debug("Unexpected top-level payload: %s", type(data).__name__)
            raise WeatherParseError(PARSE_ERROR_MESSAGE)

        _LOGGER.debug("Received data for %r: %s", query.city, data)
        return WeatherResult.from_payload(data, query.units)


async def _read_error_detail(resp: aiohttp.ClientResponse) -> str:
    """Extract the provider diagnostic text from an error response."""
    try:
        data: Any = await resp.json(content_type=None)
    except (aiohttp.ContentTypeError, ValueError):
        data = None
    else:
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        if data is not None:
            return json.dumps(data, separators=(",", ":"))

    try:
        text = await resp.text()
    except (aiohttp.ClientError, UnicodeDecodeError):
        return NO_BODY
    return text or NO_BODY


def _http_error(status: int, reason: str | None, detail: str) -> WeatherHttpError:
    if status == 401:
        return WeatherAuthError(
            status, f"Unauthorized (401): invalid API key. {detail}"
        )
    if status == 404:
        return WeatherNotFoundError(
            status, f"City not found (404). Check spelling. {detail}"
        )
    if status == 429:
        return WeatherRateLimitError(
            status, f"Too many requests (429). You may be rate-limited. {detail}"
        )
    return WeatherHttpError(status, f"HTTP {status} - {reason or ''}. {detail}")
