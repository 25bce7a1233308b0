# ABOUTME: Tests for the pure snapshot-to-view mapping.
# ABOUTME: Covers the icon table, rounding and unit suffixes, coordinates, and forecast day labels.

from datetime import date

import pytest

from weather_lookup.models import Location, WeatherSnapshot
from weather_lookup.view import (
    WEATHER_ICONS,
    CurrentView,
    ForecastDayView,
    LocationView,
    WeatherView,
    day_label,
    format_coordinates,
    format_number,
    icon_for,
    map_current,
    map_daily,
    map_weather,
    round_half_up,
)
from weather_lookup.weather_service import parse_current_data, parse_daily_data

EXPECTED_ICONS = {
    "clear": [0, 1],
    "partly-cloudy": [2],
    "overcast": [3],
    "fog": [45, 48],
    "drizzle": [51, 53, 55, 56, 57],
    "rain": [61, 63, 65, 66, 67],
    "snow": [71, 73, 75, 77],
    "rain-showers": [80, 81, 82],
    "snow-showers": [85, 86],
    "thunderstorm": [95, 96, 99],
}


@pytest.fixture
def snapshot(forecast_payload) -> WeatherSnapshot:
    return WeatherSnapshot(
        current=parse_current_data(forecast_payload["current"]),
        daily=parse_daily_data(forecast_payload["daily"]),
    )


@pytest.fixture
def paris() -> Location:
    return Location(query="Paris", latitude=48.8566, longitude=2.3522, display_name="Paris, France")


class TestIconFor:
    @pytest.mark.parametrize(
        ("code", "icon"), [(code, icon) for icon, codes in EXPECTED_ICONS.items() for code in codes]
    )
    def test_mapped_codes(self, code, icon):
        assert icon_for(code) == icon

    def test_table_has_no_extra_codes(self):
        """The icon table contains exactly the documented codes.

        Implementation: Compares the table keys with the expected code list.
        Passing implies: No undocumented code silently maps to a specific icon.
        """
        assert set(WEATHER_ICONS) == {code for codes in EXPECTED_ICONS.values() for code in codes}

    @pytest.mark.parametrize("code", [-1, 4, 44, 50, 62, 100, 200])
    def test_unmapped_codes_fall_back_to_unknown(self, code):
        assert icon_for(code) == "unknown"


class TestFormatting:
    @pytest.mark.parametrize(
        ("value", "expected"), [(18.4, 18), (18.5, 19), (-2.5, -2), (-2.6, -3), (0.0, 0), (12.6, 13)]
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.1234567, "0.1234567"), (1234567.0, "1234567"), (65.0, "65"), (0.2, "0.2"), (12.25, "12.25")],
    )
    def test_format_number_keeps_every_digit(self, value, expected):
        """format_number shows the value as given, only dropping a trailing '.0'.

        Implementation: Formats values with 7 significant digits, integral floats and short decimals.
        Passing implies: Humidity and precipitation are never truncated or shown in exponent form.
        """
        assert format_number(value) == expected

    def test_format_coordinates(self):
        assert format_coordinates(48.8566, 2.3522) == "48.86°, 2.35°"
        assert format_coordinates(-33.8688, 151.2093) == "-33.87°, 151.21°"


class TestDayLabel:
    def test_first_entry_is_today_regardless_of_weekday(self):
        assert day_label(0, date(2025, 1, 19)) == "Today"
        assert day_label(0, date(2025, 1, 15)) == "Today"

    @pytest.mark.parametrize(
        ("day", "label"),
        [
            (date(2025, 1, 19), "Sun"),
            (date(2025, 1, 20), "Mon"),
            (date(2025, 1, 21), "Tue"),
            (date(2025, 1, 22), "Wed"),
            (date(2025, 1, 23), "Thu"),
            (date(2025, 1, 24), "Fri"),
            (date(2025, 1, 25), "Sat"),
        ],
    )
    def test_later_entries_use_short_weekday(self, day, label):
        assert day_label(3, day) == label


class TestMapCurrent:
    def test_rounds_and_suffixes_values(self, snapshot):
        """map_current rounds temperature, feels-like and wind, and keeps native precision elsewhere.

        Implementation: Maps the fixture's current conditions.
        Passing implies: Display strings carry the expected units and rounding.
        """
        view = map_current(snapshot.current)

        assert view.temperature == 18
        assert view.feels_like == "18°C"
        assert view.humidity == "65%"
        assert view.wind_speed == "13 km/h"
        assert view.precipitation == "0.2 mm"
        assert view.icon == "rain"

    def test_zero_precipitation_has_no_trailing_decimal(self, snapshot):
        current = snapshot.current.model_copy(update={"precipitation_mm": 0.0})
        assert map_current(current).precipitation == "0 mm"


class TestMapDaily:
    def test_produces_seven_labelled_cards(self, snapshot):
        """map_daily yields 7 cards labelled Today then weekday names.

        Implementation: Maps the fixture week starting Wednesday 2025-01-15.
        Passing implies: Labels follow the calendar date of each entry, first entry is always 'Today'.
        """
        cards = map_daily(snapshot.daily)

        assert len(cards) == 7
        assert [c.label for c in cards] == ["Today", "Thu", "Fri", "Sat", "Sun", "Mon", "Tue"]
        assert [c.icon for c in cards] == ["rain", "clear", "partly-cloudy", "overcast", "fog", "snow", "thunderstorm"]
        assert cards[0].high == "20°"
        assert cards[1].high == "22°"
        assert cards[5].low == "-2°"


class TestMapWeather:
    def test_paris_view(self, paris, snapshot):
        view = map_weather(paris, snapshot)

        assert view.location.name == "Paris, France"
        assert view.location.query == "Paris"
        assert view.location.coordinates == "48.86°, 2.35°"
        assert view.current.icon == "rain"
        assert len(view.forecast) == 7

    def test_mapping_is_idempotent(self, paris, snapshot):
        """Mapping the same snapshot twice gives identical output.

        Implementation: Calls map_weather twice and compares the results.
        Passing implies: The mapper has no hidden state.
        """
        assert map_weather(paris, snapshot) == map_weather(paris, snapshot)


@pytest.mark.parametrize("model", [LocationView, CurrentView, ForecastDayView, WeatherView])
def test_view_models_are_documented(model):
    assert model.__doc__ and model.__doc__.strip()
