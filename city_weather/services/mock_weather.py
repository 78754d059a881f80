"""
This module generates synthetic weather for offline use and development.
"""

import random
from datetime import datetime, timedelta
from typing import Callable, List, Optional, Protocol, Tuple

from city_weather.definitions.data_sources import TIME_FORMAT
from city_weather.models.weather import City, HourlyRecord, WeatherReport
from city_weather.utils.logger import setup_logger

logger = setup_logger(__name__)

FORECAST_HOURS = 24
REFERENCE_LATITUDE = 60.0
REFERENCE_TEMPERATURE = 20.0
DEGREES_PER_LATITUDE = 2.0
MAX_VARIATION = 3.0

# (exclusive upper bound of the draw, first code, last code)
WEATHER_CODE_BANDS: Tuple[Tuple[float, int, int], ...] = (
    (0.40, 0, 3),  # clear to partly cloudy
    (0.60, 45, 48),  # fog
    (0.80, 51, 67),  # rain
    (0.90, 71, 77),  # snow
    (1.00, 80, 99),  # thunderstorm
)


class RandomSource(Protocol):
    def random(self) -> float:
        """Return a uniform float in [0, 1)."""


def seasonal_adjustment(month: int) -> float:
    """
    Seasonal temperature offset for a calendar month (1-12).
    """
    if month in (12, 1, 2):
        return -15.0
    if month in (3, 4, 5):
        return -5.0
    if month in (6, 7, 8):
        return 5.0
    if month in (9, 10, 11):
        return -2.0
    raise ValueError(f"Month must be between 1 and 12, got {month}")


def base_temperature(latitude: float) -> float:
    """
    Reference temperature for a latitude.

    20°C at 60°N, two degrees colder per degree further north.
    """
    return REFERENCE_TEMPERATURE - (latitude - REFERENCE_LATITUDE) * DEGREES_PER_LATITUDE


class MockWeatherGenerator:
    """
    Synthesizes a 24 hour forecast from latitude, season and chance.

    Every hour gets an independent temperature variation and an independent
    weather code; there is no correlation between consecutive hours.
    """

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.random_source = random_source or random.Random()
        self.clock = clock

    @classmethod
    def seeded(cls, seed: Optional[int] = None, **kwargs) -> "MockWeatherGenerator":
        return cls(random_source=random.Random(seed), **kwargs)

    def _draw_int(self, low: int, high: int) -> int:
        """Uniform integer in [low, high]."""
        span = high - low + 1
        return low + min(int(self.random_source.random() * span), span - 1)

    def generate_variation(self) -> float:
        return (self.random_source.random() - 0.5) * 2 * MAX_VARIATION

    def generate_temperature(self, latitude: float, month: int) -> float:
        return base_temperature(latitude) + seasonal_adjustment(month) + self.generate_variation()

    def generate_weather_code(self) -> int:
        draw = self.random_source.random()

        for upper_bound, first_code, last_code in WEATHER_CODE_BANDS:
            if draw < upper_bound:
                return self._draw_int(first_code, last_code)

        _, first_code, last_code = WEATHER_CODE_BANDS[-1]
        return self._draw_int(first_code, last_code)

    def generate_hourly_records(self, latitude: float, start: datetime) -> List[HourlyRecord]:
        start = start.replace(second=0, microsecond=0)
        records = []

        for hour in range(FORECAST_HOURS):
            moment = start + timedelta(hours=hour)
            records.append(
                HourlyRecord(
                    time=moment.strftime(TIME_FORMAT),
                    temperature=self.generate_temperature(latitude, start.month),
                    weather_code=self.generate_weather_code(),
                )
            )

        return records

    def generate_report(self, city: City) -> WeatherReport:
        """
        Generate a mock forecast starting at the current instant.
        """
        now = self.clock()
        records = self.generate_hourly_records(city.latitude, now)

        logger.info(
            "Generated mock weather",
            extra={
                "event": "mock_generated",
                "city": city.name,
                "hours": len(records),
                "start": records[0].time,
            },
        )

        return WeatherReport.for_city(city, records)
