"""WMO weather code → category / description / icon token.

Codes follow the Open-Meteo "WMO Weather interpretation codes" table
(https://open-meteo.com/en/docs). All three lookups share one table so a
code can never yield, say, a Thunderstorm category with a snow icon.
"""

from __future__ import annotations

from typing import Final

from weatherdash.api.models import Condition

CATEGORIES: Final[tuple[str, ...]] = (
    "Clear",
    "Clouds",
    "Mist",
    "Drizzle",
    "Rain",
    "Snow",
    "Thunderstorm",
)

DEFAULT_CATEGORY: Final = "Clear"
DEFAULT_DESCRIPTION: Final = "Clear sky"
DEFAULT_DAY_ICON: Final = "clear-day"
DEFAULT_NIGHT_ICON: Final = "clear-night"

# WMO-koodi → (kategoria, kuvaus, päiväikoni, yöikoni)
_WMO_TABLE: Final[dict[int, tuple[str, str, str, str]]] = {
    0: ("Clear", "Clear sky", "clear-day", "clear-night"),
    1: ("Clear", "Mainly clear", "clear-day", "clear-night"),
    2: ("Clouds", "Partly cloudy", "partly-cloudy-day", "partly-cloudy-night"),
    3: ("Clouds", "Overcast", "cloudy", "cloudy"),
    45: ("Mist", "Foggy", "fog", "fog"),
    48: ("Mist", "Depositing rime fog", "fog", "fog"),
    51: ("Drizzle", "Light drizzle", "showers", "showers"),
    53: ("Drizzle", "Moderate drizzle", "showers", "showers"),
    55: ("Drizzle", "Dense drizzle", "showers", "showers"),
    56: ("Drizzle", "Light freezing drizzle", "showers", "showers"),
    57: ("Drizzle", "Dense freezing drizzle", "showers", "showers"),
    61: ("Rain", "Slight rain", "rain-day", "rain-night"),
    63: ("Rain", "Moderate rain", "rain-day", "rain-night"),
    65: ("Rain", "Heavy rain", "rain-day", "rain-night"),
    66: ("Rain", "Light freezing rain", "rain-day", "rain-night"),
    67: ("Rain", "Heavy freezing rain", "rain-day", "rain-night"),
    71: ("Snow", "Slight snow fall", "snow", "snow"),
    73: ("Snow", "Moderate snow fall", "snow", "snow"),
    75: ("Snow", "Heavy snow fall", "snow", "snow"),
    77: ("Snow", "Snow grains", "snow", "snow"),
    80: ("Rain", "Slight rain showers", "showers", "showers"),
    81: ("Rain", "Moderate rain showers", "showers", "showers"),
    82: ("Rain", "Violent rain showers", "showers", "showers"),
    85: ("Snow", "Slight snow showers", "snow", "snow"),
    86: ("Snow", "Heavy snow showers", "snow", "snow"),
    95: ("Thunderstorm", "Thunderstorm", "thunderstorm", "thunderstorm"),
    96: ("Thunderstorm", "Thunderstorm with slight hail", "thunderstorm", "thunderstorm"),
    99: ("Thunderstorm", "Thunderstorm with heavy hail", "thunderstorm", "thunderstorm"),
}

KNOWN_CODES: Final[frozenset[int]] = frozenset(_WMO_TABLE)


def condition(code: int | None) -> str:
    """Category for a WMO code; unknown codes fall back to "Clear"."""
    row = _WMO_TABLE.get(code) if code is not None else None
    if row is None:
        return DEFAULT_CATEGORY
    return row[0]


def description(code: int | None) -> str:
    """Human-readable phrase for a WMO code; unknown codes fall back to "Clear sky"."""
    row = _WMO_TABLE.get(code) if code is not None else None
    if row is None:
        return DEFAULT_DESCRIPTION
    return row[1]


def icon_id(code: int | None, is_day: bool = True) -> str:
    """
    Icon token for a WMO code.

    Tuntematon koodi → kirkas päivä/yö, kuten selaimen alkuperäinen ikonimappi.
    """
    row = _WMO_TABLE.get(code) if code is not None else None
    if row is None:
        return DEFAULT_DAY_ICON if is_day else DEFAULT_NIGHT_ICON
    _, _, day_icon, night_icon = row
    return day_icon if is_day else night_icon


def resolve(code: int | None, is_day: bool = True) -> Condition:
    return Condition(
        category=condition(code),
        description=description(code),
        icon=icon_id(code, is_day),
    )
