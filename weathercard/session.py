"""Submission dispatch for weather lookups.

WeatherSession is the single entry point for "look up this city" commands.
It handles:
- Input validation before any loading signal
- One lookup in flight at a time (a new submission cancels the old one)
- Converting every WeatherError into a returned value
- Delivering loading / result / error callbacks

Presentation code MUST go through this API rather than calling the HTTP
client directly, so overlapping submissions never render out of order.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from .domains.weather import Units, WeatherQuery, WeatherResult
from .errors import WeatherError
from .http import WeatherHttpClient

_LOGGER = logging.getLogger(__name__)

LookupOutcome = WeatherResult | WeatherError


class WeatherSession:
    """Single-entry dispatch for weather lookups.

    Usage:
        session = WeatherSession(client)
        session.on_loading(show_spinner)
        session.on_result(show_weather)
        session.on_error(show_error)
        outcome = await session.submit("London", Units.METRIC)
    """

    def __init__(self, client: WeatherHttpClient) -> None:
        self._client = client
        self._inflight: asyncio.Task[WeatherResult] | None = None
        self._generation = 0

        self._loading_callbacks: list[Callable[[WeatherQuery], Any]] = []
        self._result_callbacks: list[Callable[[WeatherResult], Any]] = []
        self._error_callbacks: list[Callable[[WeatherError], Any]] = []

    # -------------------------------------------------------------------------
    # Public API: Callbacks
    # -------------------------------------------------------------------------

    def on_loading(self, callback: Callable[[WeatherQuery], Any]) -> None:
        """Register a callback fired right before a request starts."""
        self._loading_callbacks.append(callback)

    def on_result(self, callback: Callable[[WeatherResult], Any]) -> None:
        """Register a callback for successful lookups."""
        self._result_callbacks.append(callback)

    def on_error(self, callback: Callable[[WeatherError], Any]) -> None:
        """Register a callback for failed lookups."""
        self._error_callbacks.append(callback)

    # -------------------------------------------------------------------------
    # Public API: Dispatch
    # -------------------------------------------------------------------------

    @property
    def is_busy(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    async def submit(
        self, city: str, units: Units = Units.IMPERIAL
    ) -> LookupOutcome | None:
        """Look up a city and deliver the outcome.

        Args:
            city: City name as typed by the user.
            units: Unit system for this lookup.

        Returns:
            The WeatherResult or WeatherError delivered to callbacks, or
            None if a later submission superseded this one.
        """
        self._generation += 1
        generation = self._generation
        self._cancel_inflight()

        try:
            query = self._client.build_query(city, units)
        except WeatherError as err:
            _LOGGER.debug("Rejected submission %r: %s", city, err.message)
            self._emit(self._error_callbacks, err)
            return err

        self._emit(self._loading_callbacks, query)
        task = asyncio.ensure_future(self._client.fetch_query(query))
        self._inflight = task

        outcome: LookupOutcome
        try:
            outcome = await task
        except asyncio.CancelledError:
            if generation != self._generation:
                _LOGGER.debug("Lookup for %r superseded", query.city)
                return None
            raise
        except WeatherError as err:
            outcome = err
        finally:
            if self._inflight is task:
                self._inflight = None

        if generation != self._generation:
            # A newer submission started while this one was completing
            return None

        if isinstance(outcome, WeatherError):
            _LOGGER.info(
                "Lookup for %r failed (%s): %s",
                query.city,
                outcome.kind.value,
                outcome.message,
            )
            self._emit(self._error_callbacks, outcome)
        else:
            self._emit(self._result_callbacks, outcome)
        return outcome

    def cancel(self) -> None:
        """Cancel the in-flight lookup, if any. Nothing is delivered for it."""
        self._generation += 1
        self._cancel_inflight()

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def _cancel_inflight(self) -> None:
        if self._inflight is not None and not self._inflight.done():
            _LOGGER.debug("Cancelling in-flight lookup")
            self._inflight.cancel()
        self._inflight = None

    @staticmethod
    def _emit(callbacks: list[Callable[[Any], Any]], value: Any) -> None:
        for callback in callbacks:
            try:
                callback(value)
            except Exception:
                _LOGGER.exception("Error in weather session callback")
