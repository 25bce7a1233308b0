# ABOUTME: Exception hierarchy for the weather lookup pipeline.
# ABOUTME: Every failure of a search maps onto one of these; none of them is retried.


class WeatherLookupError(Exception):
    """Base error for a failed weather search."""


class QueryValidationError(WeatherLookupError):
    """The search query was empty after trimming whitespace."""


class GeocodeUnavailable(WeatherLookupError):
    """The geocoding request failed or returned an unusable response."""


class LocationNotFound(WeatherLookupError):
    """The geocoding service returned no candidates for the query."""


class ForecastUnavailable(WeatherLookupError):
    """The forecast request failed or returned a malformed payload."""
