# tests/test_wmo_codes.py
import pytest

import weatherdash.api.wmo_codes as w


def test_known_codes_map_to_category_description_and_icon():
    assert w.condition(0) == "Clear"
    assert w.description(0) == "Clear sky"
    assert w.icon_id(0, True) == "clear-day"
    assert w.icon_id(0, False) == "clear-night"

    assert w.condition(3) == "Clouds"
    assert w.description(3) == "Overcast"
    assert w.icon_id(3, True) == "cloudy"

    assert w.condition(80) == "Rain"
    assert w.description(80) == "Slight rain showers"
    assert w.icon_id(61, True) == "rain-day"
    assert w.icon_id(61, False) == "rain-night"


def test_thunderstorm_triple_is_consistent():
    assert w.condition(95) == "Thunderstorm"
    assert "Thunderstorm" in w.description(95)
    assert w.icon_id(95, True) == "thunderstorm"
    assert w.icon_id(95, False) == "thunderstorm"


@pytest.mark.parametrize("code", [777, -1, 4, 100])
def test_unknown_code_falls_back_to_clear(code):
    assert w.description(code) == "Clear sky"
    assert w.condition(code) == "Clear"
    assert w.icon_id(code, True) == w.DEFAULT_DAY_ICON == "clear-day"
    assert w.icon_id(code, False) == w.DEFAULT_NIGHT_ICON == "clear-night"


def test_none_code_falls_back_to_clear():
    cond = w.resolve(None, is_day=False)
    assert cond.category == "Clear"
    assert cond.description == "Clear sky"
    assert cond.icon == "clear-night"


# kategoria → ikonit, jotka sopivat siihen
_ICONS_BY_CATEGORY = {
    "Clear": {"clear-day", "clear-night"},
    "Clouds": {"partly-cloudy-day", "partly-cloudy-night", "cloudy"},
    "Mist": {"fog"},
    "Drizzle": {"showers"},
    "Rain": {"rain-day", "rain-night", "showers"},
    "Snow": {"snow"},
    "Thunderstorm": {"thunderstorm"},
}


@pytest.mark.parametrize("code", sorted(w.KNOWN_CODES))
def test_every_known_code_is_category_consistent(code):
    category = w.condition(code)
    assert category in w.CATEGORIES
    assert w.description(code)
    for is_day in (True, False):
        assert w.icon_id(code, is_day) in _ICONS_BY_CATEGORY[category]


def test_lookups_are_deterministic():
    assert w.resolve(63) == w.resolve(63)
    assert w.resolve(63).category == "Rain"
