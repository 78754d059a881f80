"""
This module contains configuration settings for the application.
"""

from functools import lru_cache
from typing import Optional, List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.
    Values are read from environment variables or a local .env file.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Application settings
    app_name: str = "City Weather API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Weather source selection
    use_mock_weather: bool = True
    mock_random_seed: Optional[int] = None

    # Open-Meteo settings
    weather_api_url: str = "https://api.open-meteo.com/v1/forecast"
    weather_api_timeout: int = 10

    # Retry settings
    retry_max_attempts: int = 3
    retry_wait_min: float = 1
    retry_wait_max: float = 4

    # CORS settings
    cors_origins: List[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings.
    """
    return Settings()
