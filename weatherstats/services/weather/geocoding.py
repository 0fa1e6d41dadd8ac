from __future__ import annotations

from weatherstats.core.config import get_settings
from weatherstats.core.errors import CityNotFoundError, MalformedDataError
from weatherstats.core.http import fetch_json
from weatherstats.schemas.weather import Coordinates


async def geocode_city(city: str) -> Coordinates:
    settings = get_settings()
    data = await fetch_json(settings.geocoding_url, {"name": city})

    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list) or not results:
        raise CityNotFoundError(city)

    first = results[0]
    if not isinstance(first, dict):
        raise MalformedDataError("Geocoding result is not an object")
    try:
        return Coordinates(latitude=float(first["latitude"]), longitude=float(first["longitude"]))
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedDataError(f"Geocoding result has no usable coordinates: {exc}") from exc
