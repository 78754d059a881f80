"""City weather service exceptions."""

from .common import (
    WeatherServiceException,
    UpstreamUnavailableError,
)

__all__ = [
    "WeatherServiceException",
    "UpstreamUnavailableError",
]
