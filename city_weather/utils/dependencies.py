"""
FastAPI dependency providers.

Services are built once in the application lifespan and stored on
app.state; these functions hand them to route handlers so tests can
swap them with app.dependency_overrides.
"""

from fastapi import Request

from city_weather.services.city_directory import CityDirectory
from city_weather.services.weather_service import WeatherService


def get_city_directory(request: Request) -> CityDirectory:
    """
    Provide the read-only city directory.

    Args:
        request: Incoming request

    Returns:
        CityDirectory: Directory built at startup
    """
    return request.app.state.city_directory


def get_weather_service(request: Request) -> WeatherService:
    """
    Provide the weather service configured at startup.

    Args:
        request: Incoming request

    Returns:
        WeatherService: Service bound to the configured weather source
    """
    return request.app.state.weather_service
