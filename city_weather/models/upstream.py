from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class UpstreamHourly(BaseModel):
    """
    Hourly block of an Open-Meteo forecast.

    The three series are independent and may differ in length.
    """

    model_config = ConfigDict(extra="ignore")

    time: Optional[List[str]] = None
    temperature_2m: Optional[List[float]] = None
    weather_code: Optional[List[int]] = None


class UpstreamResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None
    hourly: Optional[UpstreamHourly] = Field(None, description="Hourly forecast series")
