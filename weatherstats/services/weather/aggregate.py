from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Sequence

from weatherstats.core.errors import MalformedDataError
from weatherstats.schemas.weather import WeatherSummary


@dataclass(frozen=True)
class SeriesStats:
    average: float
    minimum: float
    maximum: float


def _series(block: Any, block_name: str, key: str) -> list[float]:
    if not isinstance(block, dict):
        raise MalformedDataError(f"Invalid JSON format or missing '{block_name}' property.")
    raw = block.get(key)
    if not isinstance(raw, list):
        raise MalformedDataError(f"Missing '{block_name}.{key}' array.")

    values: list[float] = []
    for item in raw:
        # bool is an int subclass but never a sample
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise MalformedDataError(f"Non-numeric sample {item!r} in '{block_name}.{key}'.")
        try:
            value = float(item)
        except OverflowError as exc:
            raise MalformedDataError(f"Sample out of range in '{block_name}.{key}'.") from exc
        values.append(value)
    return values


def series_stats(values: Sequence[float]) -> SeriesStats:
    if not values:
        raise MalformedDataError("Cannot aggregate an empty series.")
    if not all(math.isfinite(v) for v in values):
        raise MalformedDataError("Cannot aggregate a series with non-finite samples.")
    lo = min(values)
    hi = max(values)
    try:
        mean = math.fsum(values) / len(values)
    except OverflowError:
        # samples near the float limit; scaled terms keep the sum finite
        mean = math.fsum(v / len(values) for v in values)
    # fsum rounding can land one ulp outside [lo, hi] for near-constant series
    average = min(max(mean, lo), hi)
    return SeriesStats(average=average, minimum=lo, maximum=hi)


def summarize_forecast(payload: Any) -> WeatherSummary:
    if not isinstance(payload, dict):
        raise MalformedDataError("Forecast payload is not a JSON object.")

    hourly = payload.get("hourly")
    humidity = series_stats(_series(hourly, "hourly", "relative_humidity_2m"))
    visibility = series_stats(_series(hourly, "hourly", "visibility"))

    daily = payload.get("daily")
    uv_index = series_stats(_series(daily, "daily", "uv_index_max"))

    return WeatherSummary(
        average_humidity=humidity.average,
        min_humidity=humidity.minimum,
        max_humidity=humidity.maximum,
        average_visibility=visibility.average,
        min_visibility=visibility.minimum,
        max_visibility=visibility.maximum,
        average_uv_index=uv_index.average,
        min_uv_index=uv_index.minimum,
        max_uv_index=uv_index.maximum,
    )
