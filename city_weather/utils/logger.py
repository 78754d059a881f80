import logging
import sys

from pythonjsonlogger import jsonlogger

from city_weather.config import get_settings
from city_weather.definitions.data_sources import WeatherSource

settings = get_settings()


def service_log_fields() -> dict:
    """
    Fields stamped on every log line.

    Identifies the service build and whether weather comes from the mock
    generator or Open-Meteo, so mock and real traffic can be told apart.
    """
    source = WeatherSource.MOCK if settings.use_mock_weather else WeatherSource.OPEN_METEO
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "weather_source": source.value,
    }


def setup_logger(name: str) -> logging.Logger:
    """
    Build a JSON logger for a city_weather module.

    Handlers are attached only once, so repeated calls from the same
    module return the already configured logger.

    Args:
        name: The name of the logger (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
            static_fields=service_log_fields(),
        )
    )

    logger.addHandler(handler)
    logger.propagate = False

    return logger
