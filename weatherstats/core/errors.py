from __future__ import annotations


class WeatherLookupError(Exception):
    """Base class for anything that stops a city lookup from producing a summary."""


class CityNotFoundError(WeatherLookupError):
    def __init__(self, city: str):
        super().__init__(f"City '{city}' not found.")
        self.city = city


class UpstreamNetworkError(WeatherLookupError):
    """The upstream call did not complete or answered with a non-success status."""


class MalformedDataError(WeatherLookupError):
    """The upstream payload is missing an expected object/array or has the wrong shape."""
