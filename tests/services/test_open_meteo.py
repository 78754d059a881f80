"""
Tests for the Open-Meteo client.
"""

import httpx
import pytest

from city_weather.exceptions import UpstreamUnavailableError
from city_weather.models.weather import Coordinate
from city_weather.services.open_meteo import OpenMeteoClient

BASE_URL = "https://api.open-meteo.test/v1/forecast"

SAMPLE_BODY = {
    "latitude": 60.16,
    "longitude": 24.94,
    "timezone": "Europe/Helsinki",
    "hourly": {
        "time": ["2024-07-15T00:00", "2024-07-15T01:00"],
        "temperature_2m": [16.4, 15.9],
        "weather_code": [0, 2],
    },
}


def make_client(handler, max_attempts: int = 3) -> OpenMeteoClient:
    """Build a client whose HTTP traffic goes to the given handler."""
    return OpenMeteoClient(
        base_url=BASE_URL,
        max_attempts=max_attempts,
        wait_min=0,
        wait_max=0,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.fixture
def coordinate():
    return Coordinate(latitude=60.1699, longitude=24.9384)


class TestOpenMeteoClient:
    """Test cases for OpenMeteoClient."""

    async def test_sends_fixed_parameters(self, coordinate):
        """Test the request carries the coordinate, hourly variables and timezone."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=SAMPLE_BODY)

        client = make_client(handler)
        forecast = await client.fetch_forecast(coordinate)
        await client.aclose()

        params = seen[0].url.params
        assert str(seen[0].url).startswith(BASE_URL)
        assert params["latitude"] == "60.1699"
        assert params["longitude"] == "24.9384"
        assert params["hourly"] == "temperature_2m,weather_code"
        assert params["timezone"] == "auto"

        assert forecast.timezone == "Europe/Helsinki"
        assert forecast.hourly.weather_code == [0, 2]

    async def test_body_without_hourly(self, coordinate):
        """Test a forecast with no hourly block is still accepted."""
        client = make_client(lambda request: httpx.Response(200, json={"latitude": 60.16}))

        forecast = await client.fetch_forecast(coordinate)

        assert forecast.hourly is None

    @pytest.mark.parametrize("status_code", [400, 404, 500, 503])
    async def test_error_status(self, coordinate, status_code):
        """Test non-2xx responses become UpstreamUnavailableError."""
        client = make_client(lambda request: httpx.Response(status_code, json={"error": True}))

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await client.fetch_forecast(coordinate)

        assert exc_info.value.status_code == status_code

    async def test_non_json_body(self, coordinate):
        """Test a body that is not JSON becomes UpstreamUnavailableError."""
        client = make_client(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(UpstreamUnavailableError):
            await client.fetch_forecast(coordinate)

    async def test_malformed_series(self, coordinate):
        """Test series with the wrong item types become UpstreamUnavailableError."""
        body = {"hourly": {"time": ["2024-07-15T00:00"], "weather_code": ["sunny"]}}
        client = make_client(lambda request: httpx.Response(200, json=body))

        with pytest.raises(UpstreamUnavailableError):
            await client.fetch_forecast(coordinate)

    async def test_network_error_is_retried(self, coordinate):
        """Test connection errors are retried before succeeding."""
        attempts = []

        def handler(request: httpx.Request) -> httpx.Response:
            attempts.append(request)
            if len(attempts) < 3:
                raise httpx.ConnectError("connection refused", request=request)
            return httpx.Response(200, json=SAMPLE_BODY)

        client = make_client(handler, max_attempts=3)
        forecast = await client.fetch_forecast(coordinate)

        assert len(attempts) == 3
        assert forecast.hourly.time == SAMPLE_BODY["hourly"]["time"]

    async def test_network_error_exhausts_retries(self, coordinate):
        """Test persistent timeouts end in UpstreamUnavailableError."""
        attempts = []

        def handler(request: httpx.Request) -> httpx.Response:
            attempts.append(request)
            raise httpx.ReadTimeout("timed out", request=request)

        client = make_client(handler, max_attempts=2)

        with pytest.raises(UpstreamUnavailableError):
            await client.fetch_forecast(coordinate)

        assert len(attempts) == 2

    async def test_status_errors_not_retried(self, coordinate):
        """Test error statuses fail on the first attempt."""
        attempts = []

        def handler(request: httpx.Request) -> httpx.Response:
            attempts.append(request)
            return httpx.Response(502)

        client = make_client(handler)

        with pytest.raises(UpstreamUnavailableError):
            await client.fetch_forecast(coordinate)

        assert len(attempts) == 1
