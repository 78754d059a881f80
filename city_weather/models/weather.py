from datetime import datetime
from statistics import fmean
from typing import Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from city_weather.definitions.data_sources import WeatherDescription, describe_weather_code


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in degrees")


class City(BaseModel):
    """
    A supported city and its location.

    The lookup code is owned by the city directory, not by the city itself.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name of the city")
    coordinate: Coordinate

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("City name cannot be blank")
        return v

    @classmethod
    def create(cls, name: str, latitude: float, longitude: float) -> "City":
        return cls(name=name, coordinate=Coordinate(latitude=latitude, longitude=longitude))

    @property
    def latitude(self) -> float:
        return self.coordinate.latitude

    @property
    def longitude(self) -> float:
        return self.coordinate.longitude


class HourlyRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    time: str = Field(..., description="Local date-time, minute precision")
    temperature: float = Field(..., description="Temperature in degrees Celsius")
    weather_code: int = Field(..., ge=0, le=99, description="WMO weather code")

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Time cannot be blank")
        return v

    @property
    def description(self) -> WeatherDescription:
        return describe_weather_code(self.weather_code)

    @property
    def formatted_temperature(self) -> str:
        return f"{self.temperature:.1f}°C"

    @property
    def local_datetime(self) -> datetime:
        return datetime.fromisoformat(self.time)


class WeatherReport(BaseModel):
    """
    Hourly weather for one city, in chronological order.

    Records are copied into a tuple on construction so the report never
    shares a mutable sequence with its caller.
    """

    model_config = ConfigDict(frozen=True)

    city_name: str
    coordinate: Coordinate
    hourly_records: Tuple[HourlyRecord, ...] = ()

    @field_validator("city_name")
    @classmethod
    def validate_city_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("City name cannot be blank")
        return v

    @field_validator("hourly_records", mode="before")
    @classmethod
    def snapshot_records(cls, v: Optional[Iterable[HourlyRecord]]) -> Tuple[HourlyRecord, ...]:
        if v is None:
            return ()
        return tuple(v)

    @classmethod
    def for_city(cls, city: City, hourly_records: Optional[Iterable[HourlyRecord]]) -> "WeatherReport":
        return cls(city_name=city.name, coordinate=city.coordinate, hourly_records=hourly_records)

    @property
    def current_weather(self) -> Optional[HourlyRecord]:
        return self.hourly_records[0] if self.hourly_records else None

    @property
    def average_temperature(self) -> Optional[float]:
        if not self.hourly_records:
            return None
        return fmean(record.temperature for record in self.hourly_records)
