"""Domain-specific data structures and helpers.

This package contains the weather query, result and condition types.
"""

from .weather import (
    Units,
    WeatherCondition,
    WeatherQuery,
    WeatherResult,
    classify_condition,
    condition_icon,
)

__all__ = [
    "Units",
    "WeatherCondition",
    "WeatherQuery",
    "WeatherResult",
    "classify_condition",
    "condition_icon",
]
