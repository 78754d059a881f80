from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from city_weather.api import routes
from city_weather.config import get_settings
from city_weather.middleware.request_tracker import RequestTrackerMiddleware
from city_weather.services.city_directory import default_city_directory
from city_weather.services.mock_weather import MockWeatherGenerator
from city_weather.services.open_meteo import OpenMeteoClient
from city_weather.services.weather_service import WeatherService
from city_weather.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Starting City Weather API...",
        extra={"use_mock_weather": settings.use_mock_weather},
    )

    city_directory = default_city_directory()
    upstream_client = None if settings.use_mock_weather else OpenMeteoClient()

    app.state.city_directory = city_directory
    app.state.weather_service = WeatherService(
        city_directory=city_directory,
        use_mock=settings.use_mock_weather,
        mock_generator=MockWeatherGenerator.seeded(settings.mock_random_seed),
        upstream_client=upstream_client,
    )

    yield

    logger.info("Shutting down City Weather API...")

    if upstream_client is not None:
        await upstream_client.aclose()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

app.add_middleware(RequestTrackerMiddleware)

Instrumentator().instrument(app).expose(app, endpoint="/prometheus-metrics")

app.include_router(routes.router)

if __name__ == "__main__":
    uvicorn.run(
        "city_weather.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower()
    )
