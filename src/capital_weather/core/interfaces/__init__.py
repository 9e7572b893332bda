"""Core interfaces.

Structural contracts (Protocol) implemented by concrete adapters. The core
depends on these, never on a specific provider.
"""

from capital_weather.core.interfaces.geocoder import Geocoder
from capital_weather.core.interfaces.weather import WeatherProvider

__all__ = ["Geocoder", "WeatherProvider"]
