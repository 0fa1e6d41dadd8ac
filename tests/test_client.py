import httpx
import respx
from httpx import Response

from weatherstats.client import NEXT_PROMPT, WeatherClient, format_number


BASE_URL = "http://localhost:5000/"

LONDON_SUMMARY = {
    "AverageHumidity": 50.0,
    "MinHumidity": 40.0,
    "MaxHumidity": 60.0,
    "AverageVisibility": 2000.0,
    "MinVisibility": 1000.0,
    "MaxVisibility": 3000.0,
    "AverageUVIndex": 4.5,
    "MinUVIndex": 3.0,
    "MaxUVIndex": 6.0,
}


def _run(lines):
    feed = iter(lines)
    out = []

    def read_line():
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    with httpx.Client(base_url=BASE_URL) as http:
        WeatherClient(http, read_line=read_line, write=out.append).run()
    return out


def test_exit_stops_without_request():
    with respx.mock(assert_all_called=False) as mock:
        route = mock.get(f"{BASE_URL}weather")
        out = _run(["exit", "London"])
        assert not route.called
    assert out == ["Enter city name (or 'exit' to quit):"]


def test_exit_is_case_sensitive():
    with respx.mock:
        route = respx.get(f"{BASE_URL}weather").mock(return_value=Response(404, text="City 'Exit' not found"))
        out = _run(["Exit", "exit"])
        assert route.call_count == 1
    assert "City 'Exit' does not exist" in out


def test_prints_summary_in_order():
    with respx.mock:
        route = respx.get(f"{BASE_URL}weather").mock(return_value=Response(200, json=LONDON_SUMMARY))
        out = _run(["London", "exit"])
        assert route.calls.last.request.url.params["city"] == "London"

    assert out[1:10] == [
        "Average Humidity: 50",
        "Min Humidity: 40",
        "Max Humidity: 60",
        "Average Visibility: 2000",
        "Min Visibility: 1000",
        "Max Visibility: 3000",
        "Average UV Index: 4.5",
        "Min UV Index: 3",
        "Max UV Index: 6",
    ]
    assert out[10] == NEXT_PROMPT


def test_not_found_city():
    with respx.mock:
        respx.get(f"{BASE_URL}weather").mock(return_value=Response(404, text="City 'Nowhereville' not found"))
        out = _run(["Nowhereville", "exit"])
    assert out[1] == "City 'Nowhereville' does not exist"


def test_network_error_keeps_loop_running():
    with respx.mock:
        route = respx.get(f"{BASE_URL}weather")
        route.side_effect = [httpx.ConnectError("connection refused"), Response(200, json=LONDON_SUMMARY)]
        out = _run(["London", "London", "exit"])
        assert route.call_count == 2

    assert out[1].startswith("HTTP request error:")
    assert "Average Humidity: 50" in out


def test_blank_input_is_sent_as_query():
    with respx.mock:
        route = respx.get(f"{BASE_URL}weather").mock(return_value=Response(400, text="City name is required"))
        out = _run([""])
        assert route.calls.last.request.url.params["city"] == ""
    assert out[1].startswith("HTTP request error:")


def test_unparseable_body_reports_error():
    with respx.mock:
        respx.get(f"{BASE_URL}weather").mock(return_value=Response(200, text="{}"))
        out = _run(["London", "exit"])
    assert out[1].startswith("Error:")


def test_format_number():
    assert format_number(50.0) == "50"
    assert format_number(72.34567891) == "72.34567891"
    assert format_number(-0.5) == "-0.5"
    assert format_number(1e300) == "1e+300"
    assert format_number(-2.5e16) == "-2.5e+16"
    assert format_number(9999999999999998.0) == "9999999999999998"
