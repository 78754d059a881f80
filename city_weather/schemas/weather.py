"""
This module defines the JSON shapes returned by the API.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class HourlyWeatherSchema(BaseModel):
    """
    One hour of weather as sent to clients.
    """

    model_config = ConfigDict(populate_by_name=True)

    time: str = Field(..., description="Local date-time, minute precision")
    temperature: float = Field(..., description="Temperature in degrees Celsius")
    weather_code: int = Field(..., alias="weatherCode", description="WMO weather code")


class WeatherReportSchema(BaseModel):
    """
    Hourly weather report for a city.

    Field names follow the public camelCase contract.
    """

    model_config = ConfigDict(populate_by_name=True)

    city_name: str = Field(..., alias="cityName", description="City name")
    latitude: float = Field(..., description="City latitude")
    longitude: float = Field(..., description="City longitude")
    hourly_weather: List[HourlyWeatherSchema] = Field(
        ..., alias="hourlyWeather", description="Hourly weather, chronological"
    )


class CitySchema(BaseModel):
    name: str = Field(..., description="City name")
    latitude: float = Field(..., description="City latitude")
    longitude: float = Field(..., description="City longitude")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")
    request_id: Optional[str] = Field(None, description="Request tracking ID")


class HealthResponse(BaseModel):
    status: str = Field(..., description="Service health status")
    version: str = Field(..., description="API version")
    timestamp: str = Field(..., description="Current timestamp")
    weather_source: str = Field(..., description="Active weather source")
