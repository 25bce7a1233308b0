# ABOUTME: Search controller wiring the geocode -> forecast pipeline to the view state.
# ABOUTME: Dispatches events into the reducer and hands visible state changes to a render callback.

import itertools
import logging
from collections.abc import Callable

from weather_lookup.deps import WeatherDeps
from weather_lookup.errors import QueryValidationError
from weather_lookup.state import (
    AppState,
    Event,
    QueryRejected,
    SearchFailed,
    SearchSubmitted,
    SearchSucceeded,
    ViewState,
    reduce,
)
from weather_lookup.weather_service import fetch_forecast, resolve_location, validate_query

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Unable to fetch weather data. Please try again."


class WeatherApp:
    """Session-scoped weather lookup.

    Each call to ``search`` runs one independent pipeline. Overlapping searches are
    allowed; the reducer drops completions that are not from the latest submission.
    The optional ``render`` callback receives the new ViewState whenever it changes.
    """

    def __init__(self, deps: WeatherDeps, render: Callable[[ViewState], None] | None = None):
        self.deps = deps
        self._render = render
        self._state = AppState()
        self._seq = itertools.count(1)

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def view(self) -> ViewState:
        return self._state.view

    def dispatch(self, event: Event) -> AppState:
        """Reduce ``event`` into the current state and render if the view changed."""
        previous = self._state
        self._state = reduce(previous, event)
        if self._state is previous:
            logger.debug("Discarding stale %s for search #%d", type(event).__name__, event.seq)
        elif self._render is not None:
            self._render(self._state.view)
        return self._state

    async def search(self, query: str) -> ViewState:
        """Run one search and return the visible view state once it completes.

        If a newer search took over while this one was in flight, the newer search's
        state is returned.
        """
        seq = next(self._seq)
        try:
            query = validate_query(query)
        except QueryValidationError as e:
            return self.dispatch(QueryRejected(seq=seq, message=str(e))).view

        self.dispatch(SearchSubmitted(seq=seq))
        client = self.deps.http_client
        try:
            location = await resolve_location(client, query)
            snapshot = await fetch_forecast(client, location.latitude, location.longitude)
        except Exception:
            logger.exception("Error fetching weather data for %r", query)
            event = SearchFailed(seq=seq, message=FAILURE_MESSAGE)
        else:
            event = SearchSucceeded(seq=seq, location=location, snapshot=snapshot)

        return self.dispatch(event).view
