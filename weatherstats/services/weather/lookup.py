from __future__ import annotations

import logging

from weatherstats.schemas.weather import WeatherSummary
from weatherstats.services.weather.aggregate import summarize_forecast
from weatherstats.services.weather.geocoding import geocode_city
from weatherstats.services.weather.open_meteo import get_forecast


logger = logging.getLogger(__name__)


async def get_weather_summary(city: str) -> WeatherSummary:
    coords = await geocode_city(city)
    logger.debug("Geocoded %r to (%s, %s)", city, coords.latitude, coords.longitude)
    payload = await get_forecast(coords)
    return summarize_forecast(payload)
