# ABOUTME: Service layer for the Nominatim geocoding and Open-Meteo forecast calls.
# ABOUTME: Resolves a free-text query to a Location and fetches a validated WeatherSnapshot.

import logging
from datetime import date

import httpx
from pydantic import ValidationError

from weather_lookup.config import FORECAST_URL, GEOCODING_URL
from weather_lookup.errors import ForecastUnavailable, GeocodeUnavailable, LocationNotFound, QueryValidationError
from weather_lookup.models import FORECAST_DAYS, CurrentConditions, DailyForecastEntry, Location, WeatherSnapshot

logger = logging.getLogger(__name__)

EMPTY_QUERY_MESSAGE = "Please enter a location"

CURRENT_PARAMS = (
    "temperature_2m,relative_humidity_2m,apparent_temperature,"
    "precipitation,weather_code,wind_speed_10m"
)

DAILY_PARAMS = "weather_code,temperature_2m_max,temperature_2m_min"

# Open-Meteo field name -> CurrentConditions field name
_CURRENT_FIELDS = {
    "temperature_2m": "temperature_c",
    "relative_humidity_2m": "relative_humidity_pct",
    "apparent_temperature": "apparent_temperature_c",
    "precipitation": "precipitation_mm",
    "wind_speed_10m": "wind_speed_kph",
    "weather_code": "weather_code",
}

_DAILY_FIELDS = {
    "weather_code": "weather_code",
    "temperature_2m_max": "max_temperature_c",
    "temperature_2m_min": "min_temperature_c",
}


def validate_query(query: str) -> str:
    """Return the trimmed query, or raise QueryValidationError if nothing is left."""
    trimmed = query.strip()
    if not trimmed:
        raise QueryValidationError(EMPTY_QUERY_MESSAGE)
    return trimmed


async def resolve_location(client: httpx.AsyncClient, query: str) -> Location:
    """Geocode a free-text place name using the Nominatim search API.

    The first (highest-ranked) candidate wins; there is no disambiguation.
    """
    query = validate_query(query)
    logger.debug("Geocoding %r", query)
    try:
        resp = await client.get(GEOCODING_URL, params={"q": query, "format": "json", "limit": 1})
        resp.raise_for_status()
        data = resp.json()
    except httpx.HTTPError as e:
        raise GeocodeUnavailable(f"Geocoding request failed for {query!r}: {e}") from e
    except ValueError as e:
        raise GeocodeUnavailable(f"Geocoding response for {query!r} is not JSON: {e}") from e

    if not isinstance(data, list):
        raise GeocodeUnavailable(f"Geocoding response for {query!r} is not a list of candidates")
    if not data:
        raise LocationNotFound(f"Location not found: {query!r}")

    candidate = data[0]
    try:
        return Location(
            query=query,
            latitude=float(candidate["lat"]),
            longitude=float(candidate["lon"]),
            display_name=candidate["display_name"],
        )
    except (KeyError, TypeError, ValueError) as e:
        # pydantic's ValidationError is a ValueError
        raise GeocodeUnavailable(f"Malformed geocoding candidate for {query!r}: {e}") from e


async def fetch_forecast(client: httpx.AsyncClient, latitude: float, longitude: float) -> WeatherSnapshot:
    """Fetch current conditions and the 7-day daily forecast from Open-Meteo."""
    logger.debug("Fetching forecast for %s, %s", latitude, longitude)
    try:
        resp = await client.get(
            FORECAST_URL,
            params={
                "latitude": latitude,
                "longitude": longitude,
                "current": CURRENT_PARAMS,
                "daily": DAILY_PARAMS,
                "timezone": "auto",
                "forecast_days": FORECAST_DAYS,
            },
        )
        resp.raise_for_status()
        data = resp.json()
    except httpx.HTTPError as e:
        raise ForecastUnavailable(f"Forecast request failed: {e}") from e
    except ValueError as e:
        raise ForecastUnavailable(f"Forecast response is not JSON: {e}") from e

    if not isinstance(data, dict):
        raise ForecastUnavailable("Forecast response is not an object")

    try:
        return WeatherSnapshot(
            current=parse_current_data(data.get("current")),
            daily=parse_daily_data(data.get("daily")),
        )
    except ValidationError as e:
        raise ForecastUnavailable(f"Malformed forecast payload: {e}") from e


def parse_current_data(raw) -> CurrentConditions:
    """Map the Open-Meteo ``current`` record onto CurrentConditions."""
    if not isinstance(raw, dict):
        raise ForecastUnavailable("Forecast payload has no 'current' object")
    missing = [key for key in _CURRENT_FIELDS if raw.get(key) is None]
    if missing:
        raise ForecastUnavailable(f"Forecast payload is missing current fields: {', '.join(missing)}")
    return CurrentConditions(**{field: raw[key] for key, field in _CURRENT_FIELDS.items()})


def parse_daily_data(raw) -> list[DailyForecastEntry]:
    """Parse Open-Meteo column-oriented daily data into row-oriented DailyForecastEntry objects.

    Every column must be a list parallel to ``time``, and the series must cover exactly
    FORECAST_DAYS days in strictly ascending date order.
    """
    if not isinstance(raw, dict):
        raise ForecastUnavailable("Forecast payload has no 'daily' object")

    dates = raw.get("time")
    if not isinstance(dates, list) or len(dates) != FORECAST_DAYS:
        raise ForecastUnavailable(f"Expected {FORECAST_DAYS} daily entries in 'time'")

    for key in _DAILY_FIELDS:
        col = raw.get(key)
        if not isinstance(col, list) or len(col) != len(dates):
            raise ForecastUnavailable(f"Daily column '{key}' does not match 'time'")

    result = []
    for i, d in enumerate(dates):
        try:
            day = date.fromisoformat(d)
        except (TypeError, ValueError) as e:
            raise ForecastUnavailable(f"Invalid daily date {d!r}") from e
        if result and day <= result[-1].date:
            raise ForecastUnavailable(f"Daily dates are not in ascending order at {d!r}")
        result.append(DailyForecastEntry(date=day, **{field: raw[key][i] for key, field in _DAILY_FIELDS.items()}))
    return result
