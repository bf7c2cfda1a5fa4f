# weatherdash/api/__init__.py
from .errors import (
    CapabilityUnavailableError as CapabilityUnavailableError,
    DataUnavailableError as DataUnavailableError,
    NotFoundError as NotFoundError,
    ResolutionError as ResolutionError,
    WeatherDashError as WeatherDashError,
)
from .geocoding import resolve_location as resolve_location
from .geolocation import locate as locate
from .models import (
    Condition as Condition,
    CurrentConditions as CurrentConditions,
    ForecastDay as ForecastDay,
    Location as Location,
    UnitSystem as UnitSystem,
    WeatherReport as WeatherReport,
)
from .weather_fetch import fetch_weather as fetch_weather
