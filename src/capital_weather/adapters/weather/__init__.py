"""Weather providers.

Each module implements `capital_weather.core.interfaces.WeatherProvider`.
"""

from capital_weather.adapters.weather.open_meteo import OpenMeteoProvider

__all__ = ["OpenMeteoProvider"]
