# ABOUTME: Pydantic BaseModels for geocoded locations and forecast snapshots.
# ABOUTME: Defines the immutable data passed from the fetch pipeline to the view mapper.

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

FORECAST_DAYS = 7


class Location(BaseModel):
    """Geocoded location for one search."""

    model_config = ConfigDict(frozen=True)

    query: str
    latitude: float
    longitude: float
    display_name: str


class CurrentConditions(BaseModel):
    """Current conditions from the Open-Meteo forecast endpoint."""

    model_config = ConfigDict(frozen=True)

    temperature_c: float
    relative_humidity_pct: float
    apparent_temperature_c: float
    precipitation_mm: float
    wind_speed_kph: float
    weather_code: int


class DailyForecastEntry(BaseModel):
    """One day of the daily forecast series."""

    model_config = ConfigDict(frozen=True)

    date: date
    weather_code: int
    max_temperature_c: float
    min_temperature_c: float


class WeatherSnapshot(BaseModel):
    """Current conditions plus the 7-day forecast, index 0 being today."""

    model_config = ConfigDict(frozen=True)

    current: CurrentConditions
    daily: tuple[DailyForecastEntry, ...] = Field(min_length=FORECAST_DAYS, max_length=FORECAST_DAYS)
