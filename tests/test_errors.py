"""Tests for the weather error taxonomy."""

from __future__ import annotations

import pytest

from weathercard.errors import (
    WeatherAuthError,
    WeatherConfigurationError,
    WeatherError,
    WeatherErrorKind,
    WeatherHttpError,
    WeatherNetworkError,
    WeatherNotFoundError,
    WeatherParseError,
    WeatherRateLimitError,
    WeatherValidationError,
)


@pytest.mark.parametrize(
    ("error", "kind", "recoverable"),
    [
        (WeatherValidationError("x"), WeatherErrorKind.VALIDATION, True),
        (WeatherConfigurationError("x"), WeatherErrorKind.CONFIGURATION, False),
        (WeatherNetworkError("x"), WeatherErrorKind.NETWORK, True),
        (WeatherAuthError(401, "x"), WeatherErrorKind.AUTH, False),
        (WeatherNotFoundError(404, "x"), WeatherErrorKind.NOT_FOUND, True),
        (WeatherRateLimitError(429, "x"), WeatherErrorKind.RATE_LIMIT, True),
        (WeatherHttpError(502, "x"), WeatherErrorKind.HTTP, True),
        (WeatherHttpError(400, "x"), WeatherErrorKind.HTTP, False),
        (WeatherParseError("x"), WeatherErrorKind.PARSE, False),
    ],
)
def test_kind_and_recoverability(
    error: WeatherError, kind: WeatherErrorKind, recoverable: bool
) -> None:
    assert isinstance(error, WeatherError)
    assert error.kind is kind
    assert error.recoverable is recoverable


def test_every_kind_has_an_error_class() -> None:
    kinds = {
        cls.kind
        for cls in (
            WeatherValidationError,
            WeatherConfigurationError,
            WeatherNetworkError,
            WeatherAuthError,
            WeatherNotFoundError,
            WeatherRateLimitError,
            WeatherHttpError,
            WeatherParseError,
        )
    }
    assert kinds == set(WeatherErrorKind)


def test_message_and_status() -> None:
    err = WeatherNotFoundError(404, "City not found (404). Check spelling. nope")
    assert err.message == str(err)
    assert err.status == 404
