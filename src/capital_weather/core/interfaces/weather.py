"""Weather provider contract.

A single operation keeps the concrete provider swappable (Open-Meteo today,
a fake in tests).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from capital_weather.core.domain.models import Coordinates, WeatherOptions, WeatherReading


@runtime_checkable
class WeatherProvider(Protocol):
    """Minimal contract for a current-weather source.

    Rules:
    - `fetch_current_weather` is async because it performs HTTP I/O.
    - Provider failures propagate as `CapitalWeatherError` subclasses.
    """

    async def fetch_current_weather(
        self,
        coordinates: Coordinates,
        options: WeatherOptions,
    ) -> WeatherReading:
        """Return the current conditions at `coordinates`."""

        ...
