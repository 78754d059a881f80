"""
This module talks to the Open-Meteo forecast API.
"""

from typing import Optional

import httpx
from pydantic import ValidationError
from tenacity import (
    AsyncRetrying,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from city_weather.config import get_settings
from city_weather.definitions.data_sources import HOURLY_VARIABLES, UPSTREAM_TIMEZONE
from city_weather.exceptions import UpstreamUnavailableError
from city_weather.models.upstream import UpstreamResponse
from city_weather.models.weather import Coordinate
from city_weather.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()


class OpenMeteoClient:
    """
    Async client for hourly temperature and weather code forecasts.

    Timeouts and network errors are retried with exponential backoff; every
    other failure is reported as UpstreamUnavailableError straight away.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_attempts: Optional[int] = None,
        wait_min: Optional[float] = None,
        wait_max: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url or settings.weather_api_url
        self.max_attempts = max_attempts or settings.retry_max_attempts
        self.wait_min = settings.retry_wait_min if wait_min is None else wait_min
        self.wait_max = settings.retry_wait_max if wait_max is None else wait_max
        self.client = http_client or httpx.AsyncClient(
            timeout=timeout or settings.weather_api_timeout
        )

    async def aclose(self):
        await self.client.aclose()

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=self.wait_min, max=self.wait_max),
            retry=retry_if_exception_type((httpx.TimeoutException, httpx.NetworkError)),
            reraise=True,
        )

    @staticmethod
    def build_params(coordinate: Coordinate) -> dict:
        return {
            "latitude": coordinate.latitude,
            "longitude": coordinate.longitude,
            "hourly": HOURLY_VARIABLES,
            "timezone": UPSTREAM_TIMEZONE,
        }

    async def _get(self, params: dict) -> httpx.Response:
        async for attempt in self._retrying():
            with attempt:
                response = await self.client.get(self.base_url, params=params)
        return response

    async def fetch_forecast(self, coordinate: Coordinate) -> UpstreamResponse:
        """
        Fetch the hourly forecast for a coordinate.

        Raises:
            UpstreamUnavailableError: transport failure, error status or
                a body that is not a forecast
        """
        params = self.build_params(coordinate)
        logger.info(
            "Calling Open-Meteo",
            extra={"event": "api_call", "api": "open-meteo", **params},
        )

        try:
            response = await self._get(params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamUnavailableError(
                f"Open-Meteo returned {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except (httpx.HTTPError, RetryError) as e:
            raise UpstreamUnavailableError(f"Open-Meteo request failed: {e}") from e

        try:
            forecast = UpstreamResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise UpstreamUnavailableError(f"Malformed Open-Meteo response: {e}") from e

        logger.info(
            "Received Open-Meteo forecast",
            extra={"event": "api_success", "api": "open-meteo", "timezone": forecast.timezone},
        )
        return forecast
