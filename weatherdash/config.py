# config.py
"""Configuration settings for the weatherdash application."""

import os

HTTP_TIMEOUT_S: float = float(os.environ.get("WEATHERDASH_HTTP_TIMEOUT", "8.0"))
USER_AGENT: str = "weatherdash/1.0 (+https://open-meteo.com/)"

DEV: bool = os.environ.get("DEV", "0") == "1"

LOG_LEVEL: str = os.environ.get("WEATHERDASH_LOG_LEVEL", "INFO").upper()

# ------------------- DATA SOURCES -------------------

FORECAST_URL: str = "https://api.open-meteo.com/v1/forecast"
"""Open-Meteo forecast endpoint (current + hourly + daily)."""

GEOCODING_URL: str = "https://geocoding-api.open-meteo.com/v1/search"
"""Open-Meteo geocoding endpoint for place-name lookups."""

GEOLOCATION_URL: str = "https://ipinfo.io/json"
"""IP geolocation of the server's own egress address (visitor on the same machine or LAN)."""

GEOLOCATION_IP_URL: str = "https://ipinfo.io/{ip}/json"
"""IP geolocation of a given public address (the visitor's, read from the request)."""

GEOLOCATION_ENABLED: bool = os.environ.get("WEATHERDASH_GEOLOCATION", "1") != "0"

# ------------------- LOCATION -------------------

DEFAULT_LOCATION: str = os.environ.get("WEATHERDASH_DEFAULT_LOCATION", "London")
"""Place name fetched when geolocation is unavailable."""

CURRENT_LOCATION_NAME: str = "Current Location"

# ------------------- FORECAST -------------------

FORECAST_DAYS: int = 5
"""Days requested from the provider (today included)."""

FORECAST_VISIBLE_DAYS: int = 5
"""Upper bound of forecast cards shown after today."""

# ------------------- NOTICES -------------------

NOTICE_DURATION_S: float = 5.0
NOTICE_FADE_S: float = 0.3
"""Notice stays visible for NOTICE_DURATION_S, then fades over NOTICE_FADE_S."""

# ------------------- UI COLORS -------------------

COLOR_TEXT: str = "#e7eaee"
COLOR_TEXT_DARK: str = "#333333"
COLOR_ERROR_BG: str = "#ff6666"
