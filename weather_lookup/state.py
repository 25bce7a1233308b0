# ABOUTME: View-state machine for the weather lookup surface.
# ABOUTME: A pure reducer over search events, fenced by request sequence numbers.

from typing import Literal

from pydantic import BaseModel, ConfigDict

from weather_lookup.models import Location, WeatherSnapshot


class Idle(BaseModel):
    """Nothing searched yet; the surface shows no result, loader, or error."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["idle"] = "idle"


class Loading(BaseModel):
    """A search is in flight."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["loading"] = "loading"


class Result(BaseModel):
    """A completed search: location and snapshot from the same request."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["result"] = "result"
    location: Location
    snapshot: WeatherSnapshot


class Error(BaseModel):
    """A failed search. The message is user-facing and never the raw cause.

    ``invalid_query`` is set when the query was rejected before any request was made.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str
    invalid_query: bool = False


ViewState = Idle | Loading | Result | Error


class SearchSubmitted(BaseModel):
    """A non-empty query was submitted."""

    model_config = ConfigDict(frozen=True)

    seq: int


class QueryRejected(BaseModel):
    """A query was rejected by validation; no request was made."""

    model_config = ConfigDict(frozen=True)

    seq: int
    message: str


class SearchSucceeded(BaseModel):
    """Both the geocode and the forecast step completed."""

    model_config = ConfigDict(frozen=True)

    seq: int
    location: Location
    snapshot: WeatherSnapshot


class SearchFailed(BaseModel):
    """Either pipeline step failed."""

    model_config = ConfigDict(frozen=True)

    seq: int
    message: str


Event = SearchSubmitted | QueryRejected | SearchSucceeded | SearchFailed


class AppState(BaseModel):
    """The single source of truth for what the surface displays."""

    model_config = ConfigDict(frozen=True)

    view: ViewState = Idle()
    latest_seq: int = 0


def reduce(state: AppState, event: Event) -> AppState:
    """Apply one event and return the next state.

    Submissions (including rejected ones) become the latest request. Completions are
    applied only when they belong to the latest request; anything older returns
    ``state`` unchanged, so a slow earlier search can never overwrite a later one.
    """
    if isinstance(event, SearchSubmitted):
        if event.seq <= state.latest_seq:
            return state
        return AppState(view=Loading(), latest_seq=event.seq)

    if isinstance(event, QueryRejected):
        if event.seq <= state.latest_seq:
            return state
        return AppState(view=Error(message=event.message, invalid_query=True), latest_seq=event.seq)

    if event.seq != state.latest_seq:
        return state

    if isinstance(event, SearchSucceeded):
        return AppState(view=Result(location=event.location, snapshot=event.snapshot), latest_seq=event.seq)
    if isinstance(event, SearchFailed):
        return AppState(view=Error(message=event.message), latest_seq=event.seq)

    raise TypeError(f"Unknown event: {event!r}")
