"""
This module defines data sources and weather code vocabulary for the application.
"""

from enum import Enum

HOURLY_VARIABLES = "temperature_2m,weather_code"
UPSTREAM_TIMEZONE = "auto"
TIME_FORMAT = "%Y-%m-%dT%H:%M"


class WeatherSource(str, Enum):
    """Where a weather report was produced."""

    MOCK = "mock"
    OPEN_METEO = "open-meteo"


class WeatherDescription(str, Enum):
    """Human readable labels for WMO weather codes."""

    CLEAR_SKY = "Clear sky"
    PARTLY_CLOUDY = "Partly cloudy"
    FOGGY = "Foggy"
    RAINY = "Rainy"
    SNOW = "Snow"
    THUNDERSTORM = "Thunderstorm"
    UNKNOWN = "Unknown weather condition"


def describe_weather_code(code: int) -> WeatherDescription:
    """
    Map a WMO weather code to its description band.

    Codes that fall between the known bands are reported as unknown.
    """
    if code == 0:
        return WeatherDescription.CLEAR_SKY
    if 1 <= code <= 3:
        return WeatherDescription.PARTLY_CLOUDY
    if 45 <= code <= 48:
        return WeatherDescription.FOGGY
    if 51 <= code <= 67:
        return WeatherDescription.RAINY
    if 71 <= code <= 77:
        return WeatherDescription.SNOW
    if 80 <= code <= 99:
        return WeatherDescription.THUNDERSTORM
    return WeatherDescription.UNKNOWN
