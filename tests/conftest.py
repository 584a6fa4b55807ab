"""Pytest configuration and fixtures for weathercard tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from weathercard import WeatherHttpClient

LONDON_PAYLOAD: dict[str, Any] = {
    "name": "London",
    "main": {"temp": 15.2, "humidity": 70},
    "weather": [{"id": 800, "description": "clear sky"}],
}


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


@pytest.fixture
def client(mock_session: MagicMock) -> WeatherHttpClient:
    """Create a client with a test API key bound to the mock session."""
    return WeatherHttpClient(mock_session, "test-key")


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
    text_data: str | None = None,
    reason: str = "OK",
    json_error: Exception | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call
        text_data: Data to return from text() call
        reason: HTTP reason phrase
        json_error: Exception raised by json() instead of returning data

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status
    response.reason = reason

    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    response.text.return_value = text_data if text_data is not None else ""

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response
