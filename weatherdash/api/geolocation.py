"""Approximate the visitor's position from an IP address.

Streamlit renders on the server, so there is no ``navigator.geolocation``
to ask. The UI layer passes the visitor's public IP (taken from the request)
and ipinfo resolves that address. Without a public visitor IP the browser
runs on the server's machine or LAN, and the server's own egress address is
looked up instead. ``WEATHERDASH_GEOLOCATION=0`` behaves like a browser that
denied access.
"""

from __future__ import annotations

import logging
from typing import Any

from weatherdash import config
from weatherdash.api.errors import CapabilityUnavailableError
from weatherdash.api.http import http_get_json
from weatherdash.api.models import Location
from weatherdash.api.weather_utils import as_float

logger = logging.getLogger("weatherdash")


def _parse_loc(raw: Any) -> tuple[float, float] | None:
    """ipinfo palauttaa sijainnin muodossa "lat,lon"."""
    if not isinstance(raw, str) or "," not in raw:
        return None
    lat_s, lon_s = raw.split(",", 1)
    lat = as_float(lat_s)
    lon = as_float(lon_s)
    if lat is None or lon is None:
        return None
    return lat, lon


def locate(client_ip: str | None = None) -> Location:
    """
    Paikantaa annetun julkisen IP:n; None → palvelimen oma osoite.

    Raises:
        CapabilityUnavailableError: paikannus pois päältä tai haku epäonnistui.
    """
    if not config.GEOLOCATION_ENABLED:
        raise CapabilityUnavailableError("Geolocation is disabled")

    url = (
        config.GEOLOCATION_IP_URL.format(ip=client_ip) if client_ip else config.GEOLOCATION_URL
    )
    try:
        data = http_get_json(url)
    except Exception as err:
        raise CapabilityUnavailableError(f"Geolocation lookup failed: {err}") from err

    coords = _parse_loc(data.get("loc") if isinstance(data, dict) else None)
    if coords is None:
        raise CapabilityUnavailableError("Geolocation response has no usable position")

    lat, lon = coords
    name = (data.get("city") or "").strip() or config.CURRENT_LOCATION_NAME
    country = data.get("country") or None
    logger.info("Geolocated to %s (%.4f, %.4f)", name, lat, lon)
    return Location(latitude=lat, longitude=lon, name=name, country=country)
