"""
Common test fixtures and configuration.
"""

from datetime import datetime

import pytest

from city_weather.models.weather import City
from city_weather.services.city_directory import default_city_directory


class ScriptedRandom:
    """
    Random source that replays a fixed list of draws.

    Lets tests pick exactly which band or variation the generator lands on.
    """

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def scripted_random():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def city_directory():
    """Directory with the default Finnish cities."""
    return default_city_directory()


@pytest.fixture
def helsinki():
    return City.create("Helsinki", 60.1699, 24.9384)


@pytest.fixture
def fixed_clock():
    """Clock frozen at a summer afternoon, with seconds to truncate."""
    moment = datetime(2024, 7, 15, 14, 37, 42, 123456)
    return lambda: moment
