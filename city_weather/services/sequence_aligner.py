"""
This module turns Open-Meteo's parallel hourly series into hourly records.
"""

from typing import Optional, Sequence, Tuple

from city_weather.models.upstream import UpstreamResponse
from city_weather.models.weather import HourlyRecord
from city_weather.utils.logger import setup_logger

logger = setup_logger(__name__)


def align_hourly_records(
    times: Optional[Sequence[str]],
    temperatures: Optional[Sequence[float]],
    weather_codes: Optional[Sequence[int]],
) -> Tuple[HourlyRecord, ...]:
    """
    Zip the three hourly series into records.

    Missing series count as empty. The result is as long as the shortest
    series; trailing entries of the longer ones are dropped.
    """
    times = times or []
    temperatures = temperatures or []
    weather_codes = weather_codes or []

    size = min(len(times), len(temperatures), len(weather_codes))

    if not len(times) == len(temperatures) == len(weather_codes):
        logger.debug(
            "Hourly series lengths differ, truncating",
            extra={
                "event": "series_truncated",
                "times": len(times),
                "temperatures": len(temperatures),
                "weather_codes": len(weather_codes),
                "kept": size,
            },
        )

    return tuple(
        HourlyRecord(time=times[i], temperature=temperatures[i], weather_code=weather_codes[i])
        for i in range(size)
    )


def records_from_upstream(response: UpstreamResponse) -> Tuple[HourlyRecord, ...]:
    """
    Build hourly records from an upstream forecast body.
    """
    hourly = response.hourly
    if hourly is None:
        return ()

    return align_hourly_records(hourly.time, hourly.temperature_2m, hourly.weather_code)
