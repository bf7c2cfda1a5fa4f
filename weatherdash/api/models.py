from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


class UnitSystem(Enum):
    """Mittayksiköt: ohjaa sekä API-pyyntöä että näytettäviä yksiköitä."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def temperature_unit(self) -> str:
        return "celsius" if self is UnitSystem.METRIC else "fahrenheit"

    @property
    def wind_speed_unit(self) -> str:
        return "ms" if self is UnitSystem.METRIC else "mph"

    @property
    def temperature_suffix(self) -> str:
        return "°C" if self is UnitSystem.METRIC else "°F"

    @property
    def speed_suffix(self) -> str:
        return "m/s" if self is UnitSystem.METRIC else "mph"


@dataclass(frozen=True)
class Location:
    """Resolved place: coordinates plus the name shown in the header."""

    latitude: float
    longitude: float
    name: str
    country: str | None = None

    @property
    def label(self) -> str:
        if self.country:
            return f"{self.name}, {self.country}"
        return self.name


@dataclass(frozen=True)
class Condition:
    category: str  # "Clear" / "Clouds" / ... / "Thunderstorm"
    description: str  # "Overcast", "Slight rain showers" ...
    icon: str  # abstrakti ikoniavain, esim. "rain-day"


@dataclass(frozen=True)
class CurrentConditions:
    temperature: float
    feels_like: float
    humidity: int
    pressure: int  # hPa, pyöristetty
    wind_speed: float
    condition: Condition


@dataclass(frozen=True)
class ForecastDay:
    day: date
    temp_max: float | None
    temp_min: float | None
    condition: Condition


@dataclass(frozen=True)
class WeatherReport:
    """Yhden onnistuneen haun tulos: data + millä paikalla ja yksiköillä se haettiin."""

    location: Location
    units: UnitSystem
    current: CurrentConditions
    forecast: tuple[ForecastDay, ...] = field(default_factory=tuple)
