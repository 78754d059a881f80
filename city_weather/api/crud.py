from typing import Dict

from city_weather.models.weather import City, WeatherReport
from city_weather.schemas.weather import CitySchema, HourlyWeatherSchema, WeatherReportSchema


class WeatherCRUD:

    @staticmethod
    def transform_internal(report: WeatherReport) -> WeatherReportSchema:
        """
        Transform an internal weather report to the API format.
        """
        hourly_weather = [
            HourlyWeatherSchema(
                time=record.time,
                temperature=record.temperature,
                weather_code=record.weather_code,
            )
            for record in report.hourly_records
        ]

        return WeatherReportSchema(
            city_name=report.city_name,
            latitude=report.coordinate.latitude,
            longitude=report.coordinate.longitude,
            hourly_weather=hourly_weather,
        )

    @staticmethod
    def transform_cities(cities: Dict[str, City]) -> Dict[str, CitySchema]:
        return {
            code: CitySchema(name=city.name, latitude=city.latitude, longitude=city.longitude)
            for code, city in cities.items()
        }
