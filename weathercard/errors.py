"""Error types for weather lookups.

Every failure of a lookup is one of these exceptions. Each carries a
``kind`` so callers can branch on the category without string matching.
"""

from __future__ import annotations

from enum import Enum


class WeatherErrorKind(Enum):
    """Categories of lookup failures."""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    NETWORK = "network"
    AUTH = "auth"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"
    HTTP = "http"
    PARSE = "parse"

    @property
    def recoverable(self) -> bool:
        """Whether the user can fix the failure without an operator."""
        return self not in _OPERATOR_KINDS


_OPERATOR_KINDS = frozenset(
    {
        WeatherErrorKind.CONFIGURATION,
        WeatherErrorKind.AUTH,
        WeatherErrorKind.PARSE,
    }
)


class WeatherError(Exception):
    """Base error for weather lookup failures."""

    kind: WeatherErrorKind = WeatherErrorKind.HTTP

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def recoverable(self) -> bool:
        return self.kind.recoverable


class WeatherValidationError(WeatherError):
    """The city name was empty."""

    kind = WeatherErrorKind.VALIDATION


class WeatherConfigurationError(WeatherError):
    """No API key is configured."""

    kind = WeatherErrorKind.CONFIGURATION


class WeatherNetworkError(WeatherError):
    """The request never produced a response."""

    kind = WeatherErrorKind.NETWORK


class WeatherHttpError(WeatherError):
    """Non-success HTTP response from the provider."""

    kind = WeatherErrorKind.HTTP

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status

    @property
    def recoverable(self) -> bool:
        if self.kind is not WeatherErrorKind.HTTP:
            return self.kind.recoverable
        # Server-side failures may clear up on a later attempt
        return self.status >= 500


class WeatherAuthError(WeatherHttpError):
    """The provider rejected the API key (401)."""

    kind = WeatherErrorKind.AUTH


class WeatherNotFoundError(WeatherHttpError):
    """The provider does not know the city (404)."""

    kind = WeatherErrorKind.NOT_FOUND


class WeatherRateLimitError(WeatherHttpError):
    """Too many requests (429)."""

    kind = WeatherErrorKind.RATE_LIMIT


class WeatherParseError(WeatherError):
    """The provider response was not a JSON object."""

    kind = WeatherErrorKind.PARSE
