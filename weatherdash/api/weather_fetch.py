from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any

from weatherdash.api.errors import DataUnavailableError
from weatherdash.api.http import http_get_json
from weatherdash.api.models import (
    CurrentConditions,
    ForecastDay,
    Location,
    UnitSystem,
    WeatherReport,
)
from weatherdash.api.weather_utils import as_bool, as_float, as_int, value_at
from weatherdash.api.wmo_codes import resolve
from weatherdash.config import FORECAST_DAYS, FORECAST_URL

logger = logging.getLogger("weatherdash")

CURRENT_FIELDS: tuple[str, ...] = (
    "temperature_2m",
    "apparent_temperature",
    "relative_humidity_2m",
    "pressure_msl",
    "surface_pressure",
    "wind_speed_10m",
    "weather_code",
    "is_day",
)
HOURLY_FIELDS: tuple[str, ...] = ("temperature_2m", "weather_code")
DAILY_FIELDS: tuple[str, ...] = ("weather_code", "temperature_2m_max", "temperature_2m_min")


# --- haku -----------------------------------------------------------------------
def build_forecast_params(lat: float, lon: float, units: UnitSystem) -> dict[str, Any]:
    return {
        "latitude": lat,
        "longitude": lon,
        "current": ",".join(CURRENT_FIELDS),
        "hourly": ",".join(HOURLY_FIELDS),
        "daily": ",".join(DAILY_FIELDS),
        "timezone": "auto",
        "forecast_days": FORECAST_DAYS,
        "temperature_unit": units.temperature_unit,
        "wind_speed_unit": units.wind_speed_unit,
    }


def fetch_forecast(lat: float, lon: float, units: UnitSystem) -> dict[str, Any]:
    """Hakee Open-Meteosta nykytilan ja päiväennusteen raakana (yksi pyyntö)."""
    try:
        data = http_get_json(FORECAST_URL, params=build_forecast_params(lat, lon, units))
    except Exception as err:
        raise DataUnavailableError(f"Weather data not available: {err}") from err

    if not isinstance(data, dict):
        raise DataUnavailableError("Weather response is not a JSON object")
    return data


# --- normalisointi --------------------------------------------------------------
def _require(block: dict[str, Any], key: str, cast: Any) -> Any:
    value = cast(block.get(key))
    if value is None:
        raise DataUnavailableError(f"Weather response is missing current.{key}")
    return value


def normalize_current(current: dict[str, Any]) -> CurrentConditions:
    """
    Muuntaa ``current``-lohkon CurrentConditions-olioksi.

    Ikonin päivä/yö-variantti tulee API:n is_day-kentästä; jos sitä ei ole,
    käytetään päivävarianttia.
    """
    temperature = _require(current, "temperature_2m", as_float)
    feels_like = _require(current, "apparent_temperature", as_float)
    humidity = _require(current, "relative_humidity_2m", as_int)
    wind_speed = _require(current, "wind_speed_10m", as_float)
    code = _require(current, "weather_code", as_int)

    pressure = as_float(current.get("pressure_msl"))
    if pressure is None:
        pressure = as_float(current.get("surface_pressure"))
    if pressure is None:
        raise DataUnavailableError("Weather response is missing current.pressure_msl")

    is_day = as_bool(current.get("is_day"))

    return CurrentConditions(
        temperature=temperature,
        feels_like=feels_like,
        humidity=humidity,
        pressure=math.floor(pressure + 0.5),
        wind_speed=wind_speed,
        condition=resolve(code, is_day=True if is_day is None else is_day),
    )


def _parse_day(raw: Any) -> date | None:
    if not isinstance(raw, str):
        return None
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        # rikkinäinen päivämäärä -> ohitetaan
        return None


def normalize_daily(daily: dict[str, Any]) -> list[ForecastDay]:
    """
    Rinnakkaiset daily-listat → ForecastDay-lista aikajärjestyksessä.

    Päiväennusteessa näytetään vain max/min, joten ikoni on aina päivävariantti.
    """
    times = daily.get("time")
    if not isinstance(times, list):
        raise DataUnavailableError("Weather response is missing daily.time")
    for key in DAILY_FIELDS:
        if not isinstance(daily.get(key), list):
            raise DataUnavailableError(f"Weather response is missing daily.{key}")

    codes = daily["weather_code"]
    maxes = daily["temperature_2m_max"]
    mins = daily["temperature_2m_min"]

    days: list[ForecastDay] = []
    for idx, raw_day in enumerate(times):
        day = _parse_day(raw_day)
        if day is None:
            continue
        days.append(
            ForecastDay(
                day=day,
                temp_max=as_float(value_at(maxes, idx)),
                temp_min=as_float(value_at(mins, idx)),
                condition=resolve(as_int(value_at(codes, idx)), is_day=True),
            )
        )
    return days


def fetch_weather(location: Location, units: UnitSystem) -> WeatherReport:
    """
    Hakee sään annetulle paikalle ja palauttaa normalisoidun WeatherReportin.

    Raises:
        DataUnavailableError: pyyntö epäonnistui tai vastauksesta puuttuu kenttiä.
    """
    data = fetch_forecast(location.latitude, location.longitude, units)

    current = data.get("current")
    daily = data.get("daily")
    if not isinstance(current, dict):
        raise DataUnavailableError("Weather response has no current block")
    if not isinstance(daily, dict):
        raise DataUnavailableError("Weather response has no daily block")

    report = WeatherReport(
        location=location,
        units=units,
        current=normalize_current(current),
        forecast=tuple(normalize_daily(daily)),
    )
    logger.info(
        "Fetched weather for %s (%s): %s, %d forecast days",
        location.label,
        units.value,
        report.current.condition.description,
        len(report.forecast),
    )
    return report
