"""Current weather lookups for a single display card."""

__version__ = "0.1.0"

from .config import WeatherConfig
from .domains.weather import (
    Units,
    WeatherCondition,
    WeatherQuery,
    WeatherResult,
    classify_condition,
    condition_icon,
)
from .errors import (
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
from .http import WeatherHttpClient
from .presentation import CardState, CardView, WeatherCard
from .session import WeatherSession

__all__ = [
    "CardState",
    "CardView",
    "Units",
    "WeatherAuthError",
    "WeatherCard",
    "WeatherCondition",
    "WeatherConfig",
    "WeatherConfigurationError",
    "WeatherError",
    "WeatherErrorKind",
    "WeatherHttpClient",
    "WeatherHttpError",
    "WeatherNetworkError",
    "WeatherNotFoundError",
    "WeatherParseError",
    "WeatherQuery",
    "WeatherRateLimitError",
    "WeatherResult",
    "WeatherSession",
    "WeatherValidationError",
    "__version__",
    "classify_condition",
    "condition_icon",
]
