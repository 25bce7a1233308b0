# ABOUTME: Shared test fixtures for the weather lookup test suite.
# ABOUTME: Provides canned Nominatim candidates and a 7-day Open-Meteo forecast payload.

import pytest


@pytest.fixture
def paris_candidates() -> list[dict]:
    """Nominatim search response for 'Paris' with limit=1."""
    return [{"lat": "48.8566", "lon": "2.3522", "display_name": "Paris, France"}]


@pytest.fixture
def forecast_payload() -> dict:
    """Open-Meteo forecast response starting on Wednesday 2025-01-15."""
    return {
        "latitude": 48.86,
        "longitude": 2.35,
        "timezone": "Europe/Paris",
        "current": {
            "time": "2025-01-15T12:00",
            "temperature_2m": 18.4,
            "relative_humidity_2m": 65,
            "apparent_temperature": 17.5,
            "precipitation": 0.2,
            "weather_code": 61,
            "wind_speed_10m": 12.6,
        },
        "daily": {
            "time": [
                "2025-01-15",
                "2025-01-16",
                "2025-01-17",
                "2025-01-18",
                "2025-01-19",
                "2025-01-20",
                "2025-01-21",
            ],
            "weather_code": [61, 0, 2, 3, 45, 71, 95],
            "temperature_2m_max": [20.4, 21.5, 19.0, 18.2, 17.6, 3.1, 22.9],
            "temperature_2m_min": [12.1, 13.0, 11.5, 10.4, 9.9, -2.5, 15.0],
        },
    }
