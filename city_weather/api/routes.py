"""
This module defines the weather API routes.
"""

from datetime import datetime, UTC
from typing import Dict

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import JSONResponse

from city_weather.api.crud import WeatherCRUD
from city_weather.config import get_settings
from city_weather.schemas.weather import (
    CitySchema,
    ErrorResponse,
    HealthResponse,
    WeatherReportSchema,
)
from city_weather.services.city_directory import CityDirectory
from city_weather.services.weather_service import LookupOutcome, WeatherService
from city_weather.utils.dependencies import get_city_directory, get_weather_service
from city_weather.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()

router = APIRouter(tags=["weather"])


@router.get("/weather/cities", response_model=Dict[str, CitySchema])
async def get_cities(
    city_directory: CityDirectory = Depends(get_city_directory),
) -> Dict[str, CitySchema]:
    """
    List every supported city keyed by its city code.
    """
    return WeatherCRUD.transform_cities(city_directory.all_cities())


@router.get(
    "/weather/{city_code}",
    response_model=WeatherReportSchema,
    responses={404: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
)
async def get_weather(
    request: Request,
    city_code: str = Path(..., description="City code", min_length=1, max_length=100),
    weather_service: WeatherService = Depends(get_weather_service),
):
    """
    Get 24 hours of weather for a city code (case-insensitive).
    """
    lookup = await weather_service.lookup_weather(city_code)
    request_id = getattr(request.state, "request_id", None)

    if lookup.outcome == LookupOutcome.NOT_FOUND:
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(
                error=f"City not found: {city_code}", request_id=request_id
            ).model_dump(exclude_none=True),
        )

    if lookup.outcome == LookupOutcome.UPSTREAM_UNAVAILABLE:
        return JSONResponse(
            status_code=503,
            content=ErrorResponse(
                error="Weather data unavailable",
                detail=f"Upstream weather provider failed for {city_code}",
                request_id=request_id,
            ).model_dump(exclude_none=True),
        )

    return WeatherCRUD.transform_internal(lookup.report)


@router.get("/health", response_model=HealthResponse)
async def health_check(
    weather_service: WeatherService = Depends(get_weather_service),
) -> HealthResponse:
    """
    Health check endpoint that returns service status.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.now(UTC).isoformat(),
        weather_source=weather_service.source.value,
    )
