from __future__ import annotations

from weatherstats.schemas.weather import Coordinates, WeatherSummary

__all__ = ["Coordinates", "WeatherSummary"]
