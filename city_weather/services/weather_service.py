"""
This module provides the weather lookup used by the API.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import ValidationError

from city_weather.definitions.data_sources import WeatherSource
from city_weather.exceptions import UpstreamUnavailableError
from city_weather.models.weather import City, WeatherReport
from city_weather.services.city_directory import CityDirectory, normalize_city_code
from city_weather.services.mock_weather import MockWeatherGenerator
from city_weather.services.open_meteo import OpenMeteoClient
from city_weather.services.sequence_aligner import records_from_upstream
from city_weather.utils.logger import setup_logger

logger = setup_logger(__name__)


class LookupOutcome(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"


@dataclass(frozen=True)
class WeatherLookup:
    outcome: LookupOutcome
    source: WeatherSource
    report: Optional[WeatherReport] = None


class WeatherService:
    """
    Resolves a city code and produces its weather from the configured source.

    The source is fixed at construction: the mock generator when use_mock is
    set, otherwise the Open-Meteo client. Upstream failures are recovered
    here and never raised to the caller.
    """

    def __init__(
        self,
        city_directory: CityDirectory,
        use_mock: bool,
        mock_generator: Optional[MockWeatherGenerator] = None,
        upstream_client: Optional[OpenMeteoClient] = None,
    ):
        self.city_directory = city_directory
        self.use_mock = use_mock
        self.mock_generator = mock_generator or MockWeatherGenerator()
        self.upstream_client = upstream_client

    @property
    def source(self) -> WeatherSource:
        return WeatherSource.MOCK if self.use_mock else WeatherSource.OPEN_METEO

    async def lookup_weather(self, city_code: str) -> WeatherLookup:
        """
        Look up weather for a city code and report how the lookup ended.
        """
        code = normalize_city_code(city_code)
        logger.info(
            "Looking up weather",
            extra={"event": "weather_lookup", "city_code": code, "source": self.source.value},
        )

        city = self.city_directory.lookup(code)
        if city is None:
            return WeatherLookup(outcome=LookupOutcome.NOT_FOUND, source=self.source)

        if self.use_mock:
            report = self.mock_generator.generate_report(city)
            return WeatherLookup(outcome=LookupOutcome.FOUND, source=self.source, report=report)

        report = await self._fetch_upstream_report(city)
        if report is None:
            return WeatherLookup(outcome=LookupOutcome.UPSTREAM_UNAVAILABLE, source=self.source)

        return WeatherLookup(outcome=LookupOutcome.FOUND, source=self.source, report=report)

    async def get_weather_by_city_code(self, city_code: str) -> Optional[WeatherReport]:
        """
        Weather report for a city code, or None when none is available.
        """
        lookup = await self.lookup_weather(city_code)
        return lookup.report

    async def _fetch_upstream_report(self, city: City) -> Optional[WeatherReport]:
        if self.upstream_client is None:
            logger.error(
                "No upstream client configured",
                extra={"event": "api_error", "city": city.name},
            )
            return None

        try:
            forecast = await self.upstream_client.fetch_forecast(city.coordinate)
        except UpstreamUnavailableError as e:
            logger.error(
                "Failed to fetch weather from Open-Meteo",
                extra={
                    "event": "api_error",
                    "city": city.name,
                    "error": str(e),
                    "status_code": e.status_code,
                },
            )
            return None

        try:
            records = records_from_upstream(forecast)
        except ValidationError as e:
            logger.error(
                "Open-Meteo forecast contains invalid hourly records",
                extra={
                    "event": "api_error",
                    "city": city.name,
                    "error": str(e),
                    "error_count": e.error_count(),
                },
            )
            return None

        logger.info(
            "Built weather report from Open-Meteo",
            extra={"event": "api_report", "city": city.name, "hours": len(records)},
        )
        return WeatherReport.for_city(city, records)
