"""Domain models and errors.

Pure data structures (Pydantic v2) and the error taxonomy. The domain knows
nothing about HTTP, the CLI or any SDK.
"""

from capital_weather.core.domain.errors import (
    CapitalWeatherError,
    DecodeError,
    LoadError,
    NotFoundError,
    RequestError,
)
from capital_weather.core.domain.models import (
    UNKNOWN_CITY,
    Coordinates,
    Country,
    CountryName,
    WeatherOptions,
    WeatherReading,
)

__all__ = [
    "UNKNOWN_CITY",
    "CapitalWeatherError",
    "Coordinates",
    "Country",
    "CountryName",
    "DecodeError",
    "LoadError",
    "NotFoundError",
    "RequestError",
    "WeatherOptions",
    "WeatherReading",
]
