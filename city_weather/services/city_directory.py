"""
This module holds the fixed set of supported cities.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

from city_weather.models.weather import City
from city_weather.utils.logger import setup_logger

logger = setup_logger(__name__)

FINNISH_CITIES: Dict[str, tuple] = {
    "helsinki": ("Helsinki", 60.1699, 24.9384),
    "espoo": ("Espoo", 60.2055, 24.6559),
    "vantaa": ("Vantaa", 60.2934, 25.0378),
    "turku": ("Turku", 60.4518, 22.2666),
    "tampere": ("Tampere", 61.4978, 23.7610),
    "jyväskylä": ("Jyväskylä", 62.2415, 25.7209),
    "kuopio": ("Kuopio", 62.8924, 27.6770),
    "oulu": ("Oulu", 65.0121, 25.4651),
}


def normalize_city_code(code: str) -> str:
    return code.strip().lower()


class CityDirectory:
    """
    Read-only lookup of cities by code.

    Codes are stored lower-case and matched case-insensitively.
    """

    def __init__(self, cities: Mapping[str, City]):
        self._cities = MappingProxyType(
            {normalize_city_code(code): city for code, city in cities.items()}
        )

    def __len__(self) -> int:
        return len(self._cities)

    def __contains__(self, code: str) -> bool:
        return normalize_city_code(code) in self._cities

    def lookup(self, code: str) -> Optional[City]:
        normalized = normalize_city_code(code)
        city = self._cities.get(normalized)

        if city is None:
            logger.warning(
                "City not found",
                extra={"event": "city_not_found", "city_code": code, "normalized": normalized},
            )
            return None

        logger.debug(
            "City found",
            extra={"event": "city_found", "city_code": normalized, "city": city.name},
        )
        return city

    def all_cities(self) -> Dict[str, City]:
        return dict(self._cities)


def default_city_directory() -> CityDirectory:
    """
    Build the directory of supported Finnish cities.

    Raises pydantic's ValidationError if the static table is malformed.
    """
    directory = CityDirectory(
        {
            code: City.create(name, latitude, longitude)
            for code, (name, latitude, longitude) in FINNISH_CITIES.items()
        }
    )
    logger.info("Initialized cities", extra={"event": "cities_loaded", "count": len(directory)})
    return directory
