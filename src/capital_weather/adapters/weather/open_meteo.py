"""Open-Meteo weather provider.

Uses the free `/v1/forecast` endpoint with `current_weather=true`. The hourly
and daily selections from `WeatherOptions` are sent as well; the response
blocks they produce are not read.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError
from pydantic.config import ConfigDict

from capital_weather.adapters.http_client import describe_http_error
from capital_weather.core.config import AppSettings
from capital_weather.core.domain.errors import DecodeError, RequestError
from capital_weather.core.domain.models import Coordinates, WeatherOptions, WeatherReading

logger = logging.getLogger(__name__)


class _ForecastResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    current_weather: WeatherReading


def build_forecast_params(coordinates: Coordinates, options: WeatherOptions) -> dict[str, Any]:
    """Translate coordinates and options into Open-Meteo query parameters."""

    params: dict[str, Any] = {
        "latitude": coordinates.latitude,
        "longitude": coordinates.longitude,
        "current_weather": "true",
        "temperature_unit": options.temperature_unit,
        "timezone": options.timezone,
        "past_days": options.past_days,
    }
    if options.wind_speed_unit:
        params["windspeed_unit"] = options.wind_speed_unit
    if options.precipitation_unit:
        params["precipitation_unit"] = options.precipitation_unit
    if options.hourly_metrics:
        params["hourly"] = ",".join(options.hourly_metrics)
    if options.daily_metrics:
        params["daily"] = ",".join(options.daily_metrics)
    return params


def _api_reason(resp: httpx.Response) -> str | None:
    # Open-Meteo reports bad parameters as {"error": true, "reason": "..."}.
    try:
        payload = resp.json()
    except ValueError:
        return None
    if isinstance(payload, dict) and isinstance(payload.get("reason"), str):
        return payload["reason"]
    return None


class OpenMeteoProvider:
    """Implements `capital_weather.core.interfaces.WeatherProvider`."""

    def __init__(self, client: httpx.AsyncClient, settings: AppSettings | None = None) -> None:
        self._client = client
        self._settings = settings or AppSettings()

    @property
    def forecast_url(self) -> str:
        return f"{self._settings.weather_base_url.rstrip('/')}/v1/forecast"

    async def fetch_current_weather(
        self,
        coordinates: Coordinates,
        options: WeatherOptions,
    ) -> WeatherReading:
        params = build_forecast_params(coordinates, options)
        logger.debug("Fetching weather at %.4f,%.4f", coordinates.latitude, coordinates.longitude)
        try:
            resp = await self._client.get(self.forecast_url, params=params)
        except httpx.HTTPError as exc:
            raise RequestError(describe_http_error(exc)) from exc

        if not resp.is_success:
            reason = _api_reason(resp)
            message = f"weather request failed with status code: {resp.status_code}"
            if reason:
                message = f"{message} ({reason})"
            raise RequestError(message, status_code=resp.status_code)

        try:
            forecast = _ForecastResponse.model_validate_json(resp.content)
        except ValidationError as exc:
            raise DecodeError(f"failed to decode weather response: {exc.errors()[0]['msg']}") from exc

        return forecast.current_weather
