# ABOUTME: ASGI web entry point exposing weather searches to the rendered surface.
# ABOUTME: Starlette app serving GET /api/weather?q=... as a JSON view state; markup and styling live with the page.

import logging
from contextlib import asynccontextmanager

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from weather_lookup.app import WeatherApp
from weather_lookup.deps import WeatherDeps, create_http_client
from weather_lookup.state import Error, Result, ViewState
from weather_lookup.view import map_weather

logger = logging.getLogger(__name__)

API_PATH = "/api/weather"


def view_state_payload(view: ViewState) -> dict:
    """Serialize a view state for the page, mapping results into display fields."""
    if isinstance(view, Result):
        return {"state": "result", **map_weather(view.location, view.snapshot).model_dump(mode="json")}
    if isinstance(view, Error):
        return {"state": "error", "message": view.message}
    return {"state": view.kind}


def status_for(view: ViewState) -> int:
    """HTTP status for a finished search: 400 for a rejected query, 502 for an upstream failure."""
    if isinstance(view, Error):
        return 400 if view.invalid_query else 502
    return 200


async def weather(request: Request) -> JSONResponse:
    """Run one search with its own WeatherApp session and return the resulting view state."""
    deps: WeatherDeps = request.app.state.deps
    view = await WeatherApp(deps).search(request.query_params.get("q", ""))
    return JSONResponse(view_state_payload(view), status_code=status_for(view))


def create_app(deps: WeatherDeps) -> Starlette:
    """Build the Starlette app around ``deps``; its HTTP client is closed on shutdown."""

    @asynccontextmanager
    async def lifespan(app: Starlette):
        yield
        logger.debug("Closing upstream HTTP client")
        await deps.http_client.aclose()

    app = Starlette(routes=[Route(API_PATH, weather, methods=["GET"])], lifespan=lifespan)
    app.state.deps = deps
    return app


app = create_app(WeatherDeps(http_client=create_http_client()))
