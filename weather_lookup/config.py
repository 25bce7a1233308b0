# ABOUTME: Runtime configuration for the weather lookup client.
# ABOUTME: Loads optional overrides from the environment or a .env file.

import os

from dotenv import load_dotenv

load_dotenv()

GEOCODING_URL = os.environ.get("WEATHER_LOOKUP_GEOCODING_URL", "https://nominatim.openstreetmap.org/search")
FORECAST_URL = os.environ.get("WEATHER_LOOKUP_FORECAST_URL", "https://api.open-meteo.com/v1/forecast")

# Nominatim's usage policy rejects requests without an identifying User-Agent
USER_AGENT = os.environ.get("WEATHER_LOOKUP_USER_AGENT", "weather-lookup/0.1")
