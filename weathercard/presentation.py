"""Card rendering for weather lookups.

The card is the fixed display region that shows either a loading message,
the current conditions, or an error. Rendering produces a CardView, a list
of text lines tagged with the display class a front end styles them with.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .domains.weather import Units, WeatherQuery, WeatherResult, condition_icon
from .errors import WeatherError

if TYPE_CHECKING:
    from .session import LookupOutcome, WeatherSession

_LOGGER = logging.getLogger(__name__)

LOADING_TEXT = "Loading..."
UNKNOWN_LOCATION = "Unknown"
MISSING_VALUE = "N/A"


class CardViewKind(Enum):
    """What the card is currently showing."""

    LOADING = "loading"
    WEATHER = "weather"
    ERROR = "error"


@dataclass(frozen=True)
class CardLine:
    """One rendered line of the card."""

    css_class: str
    text: str


@dataclass(frozen=True)
class CardView:
    """Rendered card contents."""

    kind: CardViewKind
    lines: tuple[CardLine, ...] = ()

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)

    def line(self, css_class: str) -> CardLine | None:
        """Return the first line with the given display class."""
        for line in self.lines:
            if line.css_class == css_class:
                return line
        return None


@dataclass
class CardState:
    """Presentation state owned by the card.

    Attributes:
        units: Unit preference used for the next submission.
        view: What the card currently shows, None before the first lookup.
    """

    units: Units = Units.IMPERIAL
    view: CardView | None = field(default=None)


def render_loading() -> CardView:
    return CardView(CardViewKind.LOADING, (CardLine("loading", LOADING_TEXT),))


def render_result(result: WeatherResult, units: Units) -> CardView:
    """Render current conditions.

    Humidity and description lines are only present when the provider
    supplied them.
    """
    lines = [
        CardLine("cityDisplay", result.location or UNKNOWN_LOCATION),
        CardLine("weatherEmoji", condition_icon(result.condition)),
        CardLine("temp", format_temperature(result.temperature, units)),
    ]
    if result.humidity is not None:
        lines.append(CardLine("humidity", f"Humidity: {result.humidity}%"))
    if result.description:
        lines.append(CardLine("desc", result.description))
    return CardView(CardViewKind.WEATHER, tuple(lines))


def render_error(error: WeatherError) -> CardView:
    return CardView(CardViewKind.ERROR, (CardLine("errorDisplay", error.message),))


def format_temperature(value: float | None, units: Units) -> str:
    if value is None:
        return MISSING_VALUE
    return f"{value:.1f}{units.temperature_symbol}"


class WeatherCard:
    """Display region bound to a WeatherSession."""

    def __init__(self, state: CardState | None = None) -> None:
        self.state = state or CardState()

    @property
    def units(self) -> Units:
        return self.state.units

    @property
    def view(self) -> CardView | None:
        return self.state.view

    def set_units(self, units: Units) -> None:
        self.state.units = units

    def attach(self, session: WeatherSession) -> None:
        """Render every outcome the session delivers."""
        session.on_loading(self.show_loading)
        session.on_result(self.show_result)
        session.on_error(self.show_error)

    async def submit(self, session: WeatherSession, city: str) -> LookupOutcome | None:
        """Submit a city using the card's unit preference."""
        return await session.submit(city, self.state.units)

    def show_loading(self, query: WeatherQuery | None = None) -> None:
        self.state.view = render_loading()

    def show_result(self, result: WeatherResult) -> None:
        self.state.view = render_result(result, result.units)

    def show_error(self, error: WeatherError) -> None:
        _LOGGER.debug("Showing %s error: %s", error.kind.value, error.message)
        self.state.view = render_error(error)
