from __future__ import annotations

from typing import Callable, Optional

import httpx
from pydantic import ValidationError

from weatherstats.core.config import get_settings
from weatherstats.schemas.weather import WeatherSummary


EXIT_COMMAND = "exit"
FIRST_PROMPT = "Enter city name (or 'exit' to quit):"
NEXT_PROMPT = "\nEnter another city name (or 'exit' to quit):"

SUMMARY_LABELS = [
    ("Average Humidity", "average_humidity"),
    ("Min Humidity", "min_humidity"),
    ("Max Humidity", "max_humidity"),
    ("Average Visibility", "average_visibility"),
    ("Min Visibility", "min_visibility"),
    ("Max Visibility", "max_visibility"),
    ("Average UV Index", "average_uv_index"),
    ("Min UV Index", "min_uv_index"),
    ("Max UV Index", "max_uv_index"),
]


INTEGRAL_PRINT_LIMIT = 1e16


def format_number(value: float) -> str:
    if value.is_integer() and abs(value) < INTEGRAL_PRINT_LIMIT:
        return str(int(value))
    return repr(value)


def format_summary(summary: WeatherSummary) -> list[str]:
    return [f"{label}: {format_number(getattr(summary, attr))}" for label, attr in SUMMARY_LABELS]


class WeatherClient:
    """Terminal front end for the ``/weather`` endpoint."""

    def __init__(
        self,
        http: httpx.Client,
        *,
        read_line: Callable[[], str] = input,
        write: Callable[[str], None] = print,
    ):
        self.http = http
        self.read_line = read_line
        self.write = write

    def _next_city(self) -> Optional[str]:
        try:
            line = self.read_line()
        except EOFError:
            return None
        if line == EXIT_COMMAND:
            return None
        return line

    def run(self) -> None:
        self.write(FIRST_PROMPT)
        while (city := self._next_city()) is not None:
            self.fetch_weather(city)
            self.write(NEXT_PROMPT)

    def fetch_weather(self, city: str) -> None:
        try:
            resp = self.http.get("/weather", params={"city": city})
            if "not found" in resp.text:
                self.write(f"City '{city}' does not exist")
                return
            resp.raise_for_status()
            summary = WeatherSummary.model_validate_json(resp.text)
        except httpx.HTTPError as exc:
            self.write(f"HTTP request error: {exc}")
            return
        except ValidationError as exc:
            self.write(f"Error: {exc}")
            return

        for line in format_summary(summary):
            self.write(line)


def main() -> None:
    settings = get_settings()
    with httpx.Client(base_url=settings.client_base_url, timeout=settings.http_timeout_seconds) as http:
        WeatherClient(http).run()


if __name__ == "__main__":
    main()
