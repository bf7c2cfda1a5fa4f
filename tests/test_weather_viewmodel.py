# tests/test_weather_viewmodel.py
from __future__ import annotations

from datetime import date, timedelta

import pytest

import weatherdash.viewmodels.weather as vm
from weatherdash.api.models import (
    CurrentConditions,
    ForecastDay,
    Location,
    UnitSystem,
    WeatherReport,
)
from weatherdash.api.wmo_codes import resolve


def _days(n: int, start: date = date(2025, 11, 10)) -> list[ForecastDay]:
    # 2025-11-10 on maanantai
    return [
        ForecastDay(day=start + timedelta(days=i), temp_max=10.0 + i, temp_min=1.0 + i, condition=resolve(61))
        for i in range(n)
    ]


def _report(code: int = 3, units: UnitSystem = UnitSystem.METRIC, country: str | None = "GB") -> WeatherReport:
    return WeatherReport(
        location=Location(51.5, -0.12, "London", country),
        units=units,
        current=CurrentConditions(
            temperature=12.5,
            feels_like=10.4,
            humidity=81,
            pressure=1014,
            wind_speed=4.2,
            condition=resolve(code),
        ),
        forecast=tuple(_days(5)),
    )


@pytest.mark.parametrize("n, expected", [(0, 0), (1, 0), (2, 1), (5, 4), (6, 5), (9, 5)])
def test_forecast_view_skips_today_and_caps_at_five(n, expected):
    items = vm.build_forecast_view(_days(n), UnitSystem.METRIC)
    assert len(items) == expected == min(5, max(n - 1, 0))


def test_forecast_view_starts_from_index_one():
    items = vm.build_forecast_view(_days(6), UnitSystem.METRIC)

    assert [i.weekday for i in items] == ["Tue", "Wed", "Thu", "Fri", "Sat"]
    first = items[0]
    assert first.temp_max == "11°C"
    assert first.temp_min == "2°C"
    assert first.condition == "Rain"
    assert first.glyph == vm.GLYPHS["rain-day"]


def test_forecast_view_imperial_suffix_and_missing_values():
    days = _days(2)
    days[1] = ForecastDay(day=days[1].day, temp_max=None, temp_min=30.5, condition=resolve(0))
    items = vm.build_forecast_view(days, UnitSystem.IMPERIAL)

    assert items[0].temp_max == "—"
    assert items[0].temp_min == "31°F"


def test_current_view_example_overcast_in_london():
    view = vm.build_current_view(_report(code=3))

    assert view.location == "London, GB"
    assert view.description == "Overcast"
    assert view.theme == "scattered-clouds"
    assert view.temperature == "13°C"
    assert view.feels_like == "10°C"
    assert view.wind == "4.2 m/s"
    assert view.humidity == "81%"
    assert view.pressure == "1014 hPa"
    assert view.glyph == vm.GLYPHS["cloudy"]


def test_current_view_imperial_and_no_country():
    view = vm.build_current_view(_report(code=80, units=UnitSystem.IMPERIAL, country=None))

    assert view.location == "London"
    assert view.temperature.endswith("°F")
    assert view.wind == "4.2 mph"
    assert view.description == "Slight Rain Showers"
    assert view.theme == "rain"


def test_glyph_and_theme_fallbacks():
    assert vm.glyph_for("no-such-token") == vm.UNKNOWN_GLYPH
    assert vm.theme_for("Tornado") is None
    assert vm.theme_for("Mist") == "mist"


def test_round_half_up_matches_browser_rounding():
    assert vm.round_half_up(2.5) == 3
    assert vm.round_half_up(-2.5) == -2
    assert vm.round_half_up(12.49) == 12


def test_title_case_keeps_rest_of_word():
    assert vm.title_case("thunderstorm with slight hail") == "Thunderstorm With Slight Hail"
    assert vm.title_case("Clear sky") == "Clear Sky"
