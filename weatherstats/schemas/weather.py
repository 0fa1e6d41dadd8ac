from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class WeatherSummary(BaseModel):
    """Average/min/max of hourly humidity, hourly visibility and daily max UV index.

    Serialized by alias, which gives the flat wire object the client reads back.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    average_humidity: float = Field(..., alias="AverageHumidity", description="Mean relative humidity (%).")
    min_humidity: float = Field(..., alias="MinHumidity")
    max_humidity: float = Field(..., alias="MaxHumidity")
    average_visibility: float = Field(..., alias="AverageVisibility", description="Mean visibility (m).")
    min_visibility: float = Field(..., alias="MinVisibility")
    max_visibility: float = Field(..., alias="MaxVisibility")
    average_uv_index: float = Field(..., alias="AverageUVIndex", description="Mean of the daily max UV index.")
    min_uv_index: float = Field(..., alias="MinUVIndex")
    max_uv_index: float = Field(..., alias="MaxUVIndex")
