"""Weather domain data structures.

This module defines the query and result values exchanged with the
OpenWeatherMap current weather endpoint, and the mapping from provider
condition codes to display categories.

Condition codes follow the provider's grouping:
https://openweathermap.org/weather-conditions
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Units(Enum):
    """Unit systems accepted by the provider."""

    IMPERIAL = "imperial"
    METRIC = "metric"

    @property
    def temperature_symbol(self) -> str:
        return "°F" if self is Units.IMPERIAL else "°C"

    @property
    def speed_symbol(self) -> str:
        return "mph" if self is Units.IMPERIAL else "m/s"


class WeatherCondition(Enum):
    """Display categories for provider condition codes."""

    THUNDERSTORM = "thunderstorm"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    SNOW = "snow"
    ATMOSPHERE = "atmosphere"
    CLEAR = "clear"
    CLOUDS = "clouds"
    UNKNOWN = "unknown"


# Half-open [low, high) ranges, checked in order
_CONDITION_RANGES: tuple[tuple[int, int, WeatherCondition], ...] = (
    (200, 300, WeatherCondition.THUNDERSTORM),
    (300, 500, WeatherCondition.DRIZZLE),
    (500, 600, WeatherCondition.RAIN),
    (600, 700, WeatherCondition.SNOW),
    (700, 800, WeatherCondition.ATMOSPHERE),
)

_CONDITION_ICONS: dict[WeatherCondition, str] = {
    WeatherCondition.THUNDERSTORM: "⛈️",
    WeatherCondition.DRIZZLE: "🌦️",
    WeatherCondition.RAIN: "🌧️",
    WeatherCondition.SNOW: "❄️",
    WeatherCondition.ATMOSPHERE: "🌫️",
    WeatherCondition.CLEAR: "☀️",
    WeatherCondition.CLOUDS: "☁️",
    WeatherCondition.UNKNOWN: "🌈",
}


def classify_condition(code: Any) -> WeatherCondition:
    """Map a provider condition code to a display category.

    Total: anything that is not a number (including None and bools)
    is UNKNOWN, as is any number outside the provider's groups.
    """
    if not _is_number(code):
        return WeatherCondition.UNKNOWN
    for low, high, condition in _CONDITION_RANGES:
        if low <= code < high:
            return condition
    if code == 800:
        return WeatherCondition.CLEAR
    if 800 < code < 900:
        return WeatherCondition.CLOUDS
    return WeatherCondition.UNKNOWN


def condition_icon(condition: WeatherCondition) -> str:
    """Map a WeatherCondition to its display emoji."""
    return _CONDITION_ICONS.get(condition, _CONDITION_ICONS[WeatherCondition.UNKNOWN])


@dataclass(frozen=True)
class WeatherQuery:
    """A single validated lookup request.

    Attributes:
        city: Trimmed, non-empty city name.
        units: Unit system for the response.
        api_key: Provider credential.
    """

    city: str
    units: Units
    api_key: str


@dataclass(frozen=True)
class WeatherResult:
    """Current conditions for a city.

    Values are copied from the provider payload as-is. Numeric fields the
    provider omitted or sent with the wrong type are None.

    Attributes:
        location: City name reported by the provider.
        temperature: Current temperature in ``units``.
        humidity: Relative humidity percentage.
        condition_code: Provider condition code (``weather[0].id``).
        description: Provider condition text, empty when missing.
        feels_like: Apparent temperature.
        temp_min: Minimum observed temperature.
        temp_max: Maximum observed temperature.
        pressure: Atmospheric pressure (hPa).
        wind_speed: Wind speed (mph for imperial, m/s for metric).
        units: Unit system the values are expressed in.
    """

    location: str | None = None
    temperature: float | None = None
    humidity: float | None = None
    condition_code: int | None = None
    description: str = ""
    feels_like: float | None = None
    temp_min: float | None = None
    temp_max: float | None = None
    pressure: float | None = None
    wind_speed: float | None = None
    units: Units = Units.IMPERIAL

    @property
    def condition(self) -> WeatherCondition:
        return classify_condition(self.condition_code)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Only includes non-None values to minimize payload.
        """
        result: dict[str, Any] = {
            "units": self.units.value,
            "condition": self.condition.value,
            "description": self.description,
        }
        optional = {
            "location": self.location,
            "temperature": self.temperature,
            "humidity": self.humidity,
            "condition_code": self.condition_code,
            "feels_like": self.feels_like,
            "temp_min": self.temp_min,
            "temp_max": self.temp_max,
            "pressure": self.pressure,
            "wind_speed": self.wind_speed,
        }
        result.update({key: value for key, value in optional.items() if value is not None})
        return result

    @classmethod
    def from_payload(
        cls,
        data: dict[str, Any],
        units: Units = Units.IMPERIAL,
    ) -> WeatherResult:
        """Create a WeatherResult from a current weather response body.

        Args:
            data: Decoded JSON object returned by the provider.
            units: Unit system the request was made with.

        Returns:
            WeatherResult with absent fields set to None.
        """
        main = _as_mapping(data.get("main"))
        wind = _as_mapping(data.get("wind"))

        weather = data.get("weather")
        current: dict[str, Any] = {}
        if isinstance(weather, list) and weather:
            current = _as_mapping(weather[0])

        description = current.get("description")
        name = data.get("name")

        return cls(
            location=name if isinstance(name, str) else None,
            temperature=_as_number(main.get("temp")),
            humidity=_as_number(main.get("humidity")),
            condition_code=_as_code(current.get("id")),
            description=description if isinstance(description, str) else "",
            feels_like=_as_number(main.get("feels_like")),
            temp_min=_as_number(main.get("temp_min")),
            temp_max=_as_number(main.get("temp_max")),
            pressure=_as_number(main.get("pressure")),
            wind_speed=_as_number(wind.get("speed")),
            units=units,
        )


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a measurement
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_number(value: Any) -> float | None:
    """Return value if it is a number, otherwise None."""
    if not _is_number(value):
        return None
    return value


def _as_code(value: Any) -> int | None:
    """Normalize a condition code to int; non-integral numbers are absent."""
    if not _is_number(value):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        return int(value)
    return value


def _as_mapping(value: Any) -> dict[str, Any]:
    if isinstance(value, dict):
        return value
    return {}
