# ABOUTME: Pure mapping from a WeatherSnapshot to view-ready fields.
# ABOUTME: Owns the single weather-code icon table, rounding rules, and forecast day labels.

import math
from collections.abc import Sequence
from datetime import date

from pydantic import BaseModel, ConfigDict

from weather_lookup.models import CurrentConditions, DailyForecastEntry, Location, WeatherSnapshot

UNKNOWN_ICON = "unknown"

# Open-Meteo WMO weather codes -> semantic icon identifiers
WEATHER_ICONS: dict[int, str] = {
    0: "clear",
    1: "clear",
    2: "partly-cloudy",
    3: "overcast",
    45: "fog",
    48: "fog",
    51: "drizzle",
    53: "drizzle",
    55: "drizzle",
    56: "drizzle",
    57: "drizzle",
    61: "rain",
    63: "rain",
    65: "rain",
    66: "rain",
    67: "rain",
    71: "snow",
    73: "snow",
    75: "snow",
    77: "snow",
    80: "rain-showers",
    81: "rain-showers",
    82: "rain-showers",
    85: "snow-showers",
    86: "snow-showers",
    95: "thunderstorm",
    96: "thunderstorm",
    99: "thunderstorm",
}

# Sunday-first, matching the weekday index 0 = Sunday ... 6 = Saturday
DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


class LocationView(BaseModel):
    """Location header: the query, the geocoded name and rounded coordinates."""

    model_config = ConfigDict(frozen=True)

    query: str
    name: str
    coordinates: str


class CurrentView(BaseModel):
    """Display strings for the current-conditions panel."""

    model_config = ConfigDict(frozen=True)

    temperature: int
    feels_like: str
    humidity: str
    wind_speed: str
    precipitation: str
    icon: str


class ForecastDayView(BaseModel):
    """One forecast card."""

    model_config = ConfigDict(frozen=True)

    date: date
    label: str
    icon: str
    high: str
    low: str


class WeatherView(BaseModel):
    """Everything the surface needs to display one result."""

    model_config = ConfigDict(frozen=True)

    location: LocationView
    current: CurrentView
    forecast: tuple[ForecastDayView, ...]


def icon_for(weather_code: int) -> str:
    """Map a weather code to its icon identifier, falling back to UNKNOWN_ICON."""
    return WEATHER_ICONS.get(weather_code, UNKNOWN_ICON)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def format_number(value: float) -> str:
    """Format a value in its native precision, dropping a trailing '.0'."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_coordinates(latitude: float, longitude: float) -> str:
    return f"{latitude:.2f}°, {longitude:.2f}°"


def day_label(index: int, day: date) -> str:
    """Label a forecast day: 'Today' for the first entry, else the short weekday name."""
    if index == 0:
        return "Today"
    # date.weekday() is Monday-first
    return DAY_NAMES[(day.weekday() + 1) % 7]


def map_location(location: Location) -> LocationView:
    return LocationView(
        query=location.query,
        name=location.display_name,
        coordinates=format_coordinates(location.latitude, location.longitude),
    )


def map_current(current: CurrentConditions) -> CurrentView:
    return CurrentView(
        temperature=round_half_up(current.temperature_c),
        feels_like=f"{round_half_up(current.apparent_temperature_c)}°C",
        humidity=f"{format_number(current.relative_humidity_pct)}%",
        wind_speed=f"{round_half_up(current.wind_speed_kph)} km/h",
        precipitation=f"{format_number(current.precipitation_mm)} mm",
        icon=icon_for(current.weather_code),
    )


def map_daily(daily: Sequence[DailyForecastEntry]) -> list[ForecastDayView]:
    """Build one forecast card per daily entry, in the snapshot's order."""
    return [
        ForecastDayView(
            date=entry.date,
            label=day_label(i, entry.date),
            icon=icon_for(entry.weather_code),
            high=f"{round_half_up(entry.max_temperature_c)}°",
            low=f"{round_half_up(entry.min_temperature_c)}°",
        )
        for i, entry in enumerate(daily)
    ]


def map_weather(location: Location, snapshot: WeatherSnapshot) -> WeatherView:
    """Map a completed search into the full view. Pure: same input, same output."""
    return WeatherView(
        location=map_location(location),
        current=map_current(snapshot.current),
        forecast=tuple(map_daily(snapshot.daily)),
    )
