"""Domain models (Pydantic v2).

These models describe *what* the data is, not *how* it is fetched:
- `Country` mirrors a REST Countries record (only the fields we read)
- `Coordinates` mirrors a Nominatim search hit (`lat`/`lon` arrive as strings)
- `WeatherOptions` / `WeatherReading` are the weather provider contract

All models are frozen: once loaded they are shared read-only.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

UNKNOWN_CITY = "Unknown"


class CountryName(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    common: str = Field(
        default="",
        description="Common (short) English name of the country.",
    )

    @field_validator("common", mode="before")
    @classmethod
    def _null_common(cls, value: object) -> object:
        return "" if value is None else value


class Country(BaseModel):
    """A country and its capital cities, as listed by the countries provider."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: CountryName = Field(
        default_factory=CountryName,
        description="Name block of the record; only `common` is used.",
    )
    capital: tuple[str, ...] = Field(
        default=(),
        description="Capital city names in provider order. May be empty.",
    )

    @field_validator("name", mode="before")
    @classmethod
    def _null_name(cls, value: object) -> object:
        return {} if value is None else value

    @field_validator("capital", mode="before")
    @classmethod
    def _null_capital(cls, value: object) -> object:
        # Territories without a capital come as `null`.
        return () if value is None else value

    @property
    def common_name(self) -> str:
        return self.name.common

    @property
    def capitals(self) -> tuple[str, ...]:
        return self.capital

    def primary_capital(self) -> str:
        """First listed capital, or `UNKNOWN_CITY` when the country has none."""

        if not self.capital:
            return UNKNOWN_CITY
        return self.capital[0]


class Coordinates(BaseModel):
    """A WGS84 location.

    Nominatim encodes both fields as strings (`"52.52"`); pydantic's lax mode
    converts them with `float()`. Range checks are left to the weather provider.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    latitude: float = Field(..., alias="lat")
    longitude: float = Field(..., alias="lon")


class WeatherOptions(BaseModel):
    """Query options sent alongside a current-weather request."""

    model_config = ConfigDict(frozen=True)

    temperature_unit: str = Field(default="celsius")
    wind_speed_unit: str | None = Field(default=None)
    precipitation_unit: str | None = Field(default=None)
    timezone: str = Field(default="Asia/Jerusalem")
    past_days: int = Field(default=2, ge=0, le=92)
    hourly_metrics: tuple[str, ...] = Field(default=("cloudcover", "relativehumidity_2m"))
    daily_metrics: tuple[str, ...] = Field(default=("temperature_2m_max",))


class WeatherReading(BaseModel):
    """Current conditions at a location.

    Only `temperature` is read by the poller; the rest is kept for callers
    that want it.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    temperature: float = Field(
        ...,
        description="Air temperature in the unit requested by `WeatherOptions`.",
    )
    wind_speed: float | None = Field(default=None, alias="windspeed")
    wind_direction: float | None = Field(default=None, alias="winddirection")
    weather_code: int | None = Field(default=None, alias="weathercode")
    time: datetime | None = Field(default=None)
