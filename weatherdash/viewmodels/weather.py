from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from weatherdash.api.models import ForecastDay, UnitSystem, WeatherReport
from weatherdash.config import FORECAST_VISIBLE_DAYS

# Ikoniavain → glyfi. Avaimet tulevat wmo_codes-taulusta.
GLYPHS: dict[str, str] = {
    "clear-day": "☀️",
    "clear-night": "🌙",
    "partly-cloudy-day": "⛅",
    "partly-cloudy-night": "☁️",
    "cloudy": "☁️",
    "fog": "🌫️",
    "showers": "🌧️",
    "rain-day": "🌦️",
    "rain-night": "🌧️",
    "snow": "❄️",
    "thunderstorm": "⚡",
}
UNKNOWN_GLYPH = "❓"

THEMES: dict[str, str] = {
    "Clear": "clear-sky",
    "Clouds": "scattered-clouds",
    "Drizzle": "shower-rain",
    "Rain": "rain",
    "Thunderstorm": "thunderstorm",
    "Snow": "snow",
    "Mist": "mist",
}

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
NO_VALUE = "—"


@dataclass(frozen=True)
class CurrentView:
    """Nykytilan kortille valmiit merkkijonot."""

    location: str
    temperature: str
    description: str
    glyph: str
    feels_like: str
    wind: str
    humidity: str
    pressure: str
    theme: str | None


@dataclass(frozen=True)
class ForecastItemView:
    weekday: str
    glyph: str
    condition: str
    temp_max: str
    temp_min: str


def round_half_up(value: float) -> int:
    """Math.round-yhteensopiva pyöristys (2.5 → 3, -2.5 → -2)."""
    return math.floor(value + 0.5)


def format_temp(value: float | None, units: UnitSystem) -> str:
    if value is None:
        return NO_VALUE
    return f"{round_half_up(value)}{units.temperature_suffix}"


def title_case(text: str) -> str:
    """Uppercase the first letter of every space-separated word, leave the rest alone."""
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def glyph_for(token: str) -> str:
    return GLYPHS.get(token, UNKNOWN_GLYPH)


def theme_for(category: str) -> str | None:
    """Background theme for a condition category, or None to keep the default look."""
    return THEMES.get(category)


def weekday_name(day: date) -> str:
    return _WEEKDAYS[day.weekday()]


def build_current_view(report: WeatherReport) -> CurrentView:
    current = report.current
    units = report.units
    return CurrentView(
        location=report.location.label,
        temperature=format_temp(current.temperature, units),
        description=title_case(current.condition.description),
        glyph=glyph_for(current.condition.icon),
        feels_like=format_temp(current.feels_like, units),
        wind=f"{current.wind_speed:g} {units.speed_suffix}",
        humidity=f"{current.humidity}%",
        pressure=f"{current.pressure} hPa",
        theme=theme_for(current.condition.category),
    )


def build_forecast_view(
    days: Sequence[ForecastDay],
    units: UnitSystem,
    limit: int = FORECAST_VISIBLE_DAYS,
) -> list[ForecastItemView]:
    """
    Ennusterivi: ohitetaan indeksi 0 (tämä päivä) ja näytetään enintään ``limit`` päivää.

    Tuottaa aina ``min(limit, len(days) - 1)`` alkiota (0, jos päiviä on korkeintaan yksi).
    """
    return [
        ForecastItemView(
            weekday=weekday_name(day.day),
            glyph=glyph_for(day.condition.icon),
            condition=day.condition.category,
            temp_max=format_temp(day.temp_max, units),
            temp_min=format_temp(day.temp_min, units),
        )
        for day in list(days)[1 : limit + 1]
    ]
