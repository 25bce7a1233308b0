# ABOUTME: Dependency container for the weather lookup controller using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient shared by the geocoding and forecast calls.

import httpx
from pydantic import BaseModel, ConfigDict

from weather_lookup.config import USER_AGENT


class WeatherDeps(BaseModel):
    """Dependencies injected into WeatherApp."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient


def create_http_client() -> httpx.AsyncClient:
    """Create an httpx client for the upstream weather APIs.

    Failures are terminal for a search, so no retry transport is installed and the
    transport's default timeout applies.
    """
    return httpx.AsyncClient(headers={"User-Agent": USER_AGENT, "Accept": "application/json"})
