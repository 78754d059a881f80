"""
Services package initialization.
"""

from city_weather.services.city_directory import CityDirectory, default_city_directory
from city_weather.services.mock_weather import MockWeatherGenerator
from city_weather.services.open_meteo import OpenMeteoClient
from city_weather.services.sequence_aligner import align_hourly_records, records_from_upstream
from city_weather.services.weather_service import (
    LookupOutcome,
    WeatherLookup,
    WeatherService,
)

__all__ = [
    "CityDirectory",
    "default_city_directory",
    "MockWeatherGenerator",
    "OpenMeteoClient",
    "align_hourly_records",
    "records_from_upstream",
    "LookupOutcome",
    "WeatherLookup",
    "WeatherService",
]
