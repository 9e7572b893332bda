"""Polling loop: random capital -> coordinates -> current weather.

The loop owns no I/O of its own. Geocoding and weather go through the core
interfaces, and everything user-visible is reported through `PollerHooks`
so the CLI decides how to print.
"""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Awaitable, Callable, Sequence

from capital_weather.core.domain.errors import CapitalWeatherError
from capital_weather.core.domain.models import Country, WeatherOptions, WeatherReading
from capital_weather.core.interfaces.geocoder import Geocoder
from capital_weather.core.interfaces.weather import WeatherProvider
from capital_weather.core.services.ticker import Ticker

logger = logging.getLogger(__name__)

TICK_INTERVAL_SECONDS = 5.0

DEFAULT_WEATHER_OPTIONS = WeatherOptions(
    temperature_unit="celsius",
    timezone="Asia/Jerusalem",
    past_days=2,
    hourly_metrics=("cloudcover", "relativehumidity_2m"),
    daily_metrics=("temperature_2m_max",),
)


def get_random_city(countries: Sequence[Country], rng: random.Random) -> str:
    """Pick a country uniformly at random and return its first capital.

    Returns `"Unknown"` for countries without a capital. `countries` must not
    be empty.
    """

    if not countries:
        raise ValueError("countries must not be empty")
    return countries[rng.randrange(len(countries))].primary_capital()


@dataclass
class PollerHooks:
    """Optional callbacks for UI layers."""

    reading: Callable[[str, WeatherReading], None] | None = None
    geocode_failed: Callable[[str, CapitalWeatherError], None] | None = None
    weather_failed: Callable[[str, CapitalWeatherError], None] | None = None


@dataclass
class TickResult:
    """Outcome of one tick. Exactly one of `reading` / `error` is set."""

    city: str
    reading: WeatherReading | None = None
    error: CapitalWeatherError | None = None


class Poller:
    """Runs one tick per timer fire until the stop event is set.

    Ticks never overlap and are not interrupted once started: the stop event
    is only observed while waiting for the next fire.
    """

    def __init__(
        self,
        countries: Sequence[Country],
        geocoder: Geocoder,
        weather: WeatherProvider,
        *,
        options: WeatherOptions = DEFAULT_WEATHER_OPTIONS,
        rng: random.Random | None = None,
        ticker: Callable[[], Awaitable[None]] | None = None,
        hooks: PollerHooks | None = None,
    ) -> None:
        if not countries:
            raise ValueError("countries must not be empty")
        self._countries = tuple(countries)
        self._geocoder = geocoder
        self._weather = weather
        self._options = options
        self._rng = rng or random.Random()
        self._ticker = ticker
        self._hooks = hooks or PollerHooks()

    async def tick(self) -> TickResult:
        city = get_random_city(self._countries, self._rng)

        try:
            coordinates = await self._geocoder.geocode(city)
        except CapitalWeatherError as exc:
            if self._hooks.geocode_failed:
                self._hooks.geocode_failed(city, exc)
            return TickResult(city=city, error=exc)

        try:
            reading = await self._weather.fetch_current_weather(coordinates, self._options)
        except CapitalWeatherError as exc:
            if self._hooks.weather_failed:
                self._hooks.weather_failed(city, exc)
            return TickResult(city=city, error=exc)

        if self._hooks.reading:
            self._hooks.reading(city, reading)
        return TickResult(city=city, reading=reading)

    async def run(self, stop: asyncio.Event) -> None:
        """Poll until `stop` is set.

        Each iteration races the ticker against `stop`; if both are ready at
        once, `stop` wins.
        """

        ticker = self._ticker or Ticker(TICK_INTERVAL_SECONDS).wait
        stop_task = asyncio.ensure_future(stop.wait())
        try:
            while not stop.is_set():
                tick_task = asyncio.ensure_future(ticker())
                await asyncio.wait(
                    {tick_task, stop_task},
                    return_when=asyncio.FIRST_COMPLETED,
                )
                if stop.is_set():
                    tick_task.cancel()
                    await asyncio.gather(tick_task, return_exceptions=True)
                    break
                tick_task.result()
                await self.tick()
        finally:
            stop_task.cancel()
            await asyncio.gather(stop_task, return_exceptions=True)
        logger.debug("Poller stopped")
