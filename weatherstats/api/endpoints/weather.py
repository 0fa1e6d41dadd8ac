from __future__ import annotations

import logging

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from weatherstats.core.errors import WeatherLookupError
from weatherstats.schemas.weather import WeatherSummary
from weatherstats.services.weather.lookup import get_weather_summary


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/weather",
    response_model=WeatherSummary,
    responses={400: {"description": "City name is required"}, 404: {"description": "City not found"}},
)
async def weather(city: str | None = Query(None)):
    if not city:
        return PlainTextResponse("City name is required", status_code=400)

    try:
        return await get_weather_summary(city)
    except WeatherLookupError as exc:
        # Every failure kind reads as "not found" to the caller; the cause only shows up here.
        logger.warning("Error processing request for city '%s': %s: %s", city, type(exc).__name__, exc)
        return PlainTextResponse(f"City '{city}' not found", status_code=404)
