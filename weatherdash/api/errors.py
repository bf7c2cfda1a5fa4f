"""Error taxonomy for the weather pipeline.

Every error is caught by the dashboard controller and turned into a
user-visible notice, so none of them is fatal to the session.
"""

from __future__ import annotations


class WeatherDashError(RuntimeError):
    """Base class for recoverable weather pipeline failures."""


class ResolutionError(WeatherDashError):
    """Geocoding request failed on the transport level."""


class NotFoundError(WeatherDashError):
    """Geocoding returned no match or an unreadable payload."""


class DataUnavailableError(WeatherDashError):
    """Forecast request failed or the response lacked required fields."""


class CapabilityUnavailableError(WeatherDashError):
    """Geolocation is disabled, unsupported or could not determine a position."""
