from __future__ import annotations

from typing import Any

from weatherstats.core.config import get_settings
from weatherstats.core.http import fetch_json
from weatherstats.schemas.weather import Coordinates


HOURLY_FIELDS = ["relative_humidity_2m", "visibility"]
DAILY_FIELDS = ["uv_index_max"]


async def get_forecast(coords: Coordinates) -> Any:
    """Return the raw forecast payload; shape checks happen in aggregation."""
    settings = get_settings()
    params = {
        "latitude": coords.latitude,
        "longitude": coords.longitude,
        "hourly": ",".join(HOURLY_FIELDS),
        "daily": ",".join(DAILY_FIELDS),
    }
    return await fetch_json(settings.forecast_url, params)
