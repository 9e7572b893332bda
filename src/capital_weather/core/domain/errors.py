"""Error taxonomy.

Adapters translate library exceptions (httpx, json, pydantic) into these so
the core never depends on an HTTP library:
- `LoadError` is fatal and only raised during startup
- `RequestError`, `DecodeError` and `NotFoundError` are per-tick and recoverable
"""

from __future__ import annotations


class CapitalWeatherError(Exception):
    """Base class for every error raised by this package."""


class RequestError(CapitalWeatherError):
    """The request could not be sent, or the provider answered with a failure status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DecodeError(CapitalWeatherError):
    """The response body does not have the expected shape."""


class NotFoundError(CapitalWeatherError):
    """The provider answered successfully but returned no result."""


class LoadError(CapitalWeatherError):
    """The country list could not be loaded at startup.

    The underlying `RequestError` or `DecodeError` is chained as `__cause__`.
    """
