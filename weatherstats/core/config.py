from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
DEFAULT_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WEATHERSTATS_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    host: str = Field(default="localhost")
    port: int = Field(default=5000, ge=1, le=65535)

    geocoding_url: str = Field(default=DEFAULT_GEOCODING_URL)
    forecast_url: str = Field(default=DEFAULT_FORECAST_URL)

    http_timeout_seconds: float = Field(default=10.0, ge=1.0, le=60.0)
    http_retries: int = Field(default=0, ge=0, le=5)
    http_retry_backoff_seconds: float = Field(default=0.35, ge=0.0, le=5.0)

    # Interactive client
    client_base_url: str = Field(default="http://localhost:5000/")

    log_level: str = Field(default="INFO")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
