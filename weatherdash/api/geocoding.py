from __future__ import annotations

import logging
from typing import Any

import requests

from weatherdash.api.errors import NotFoundError, ResolutionError
from weatherdash.api.http import http_get_json
from weatherdash.api.models import Location
from weatherdash.api.weather_utils import as_float
from weatherdash.config import GEOCODING_URL

logger = logging.getLogger("weatherdash")


def build_geocoding_params(query: str) -> dict[str, Any]:
    # requests hoitaa URL-enkoodauksen
    return {
        "name": query,
        "count": 1,
        "language": "en",
        "format": "json",
    }


def _parse_top_result(data: Any, query: str) -> Location:
    results = data.get("results") if isinstance(data, dict) else None
    if not results or not isinstance(results, list):
        raise NotFoundError(f"No geocoding match for {query!r}")

    top = results[0]
    if not isinstance(top, dict):
        raise NotFoundError(f"Malformed geocoding result for {query!r}")

    lat = as_float(top.get("latitude"))
    lon = as_float(top.get("longitude"))
    if lat is None or lon is None:
        raise NotFoundError(f"Geocoding result for {query!r} has no coordinates")

    name = str(top.get("name") or query).strip()
    country = top.get("country") or None
    return Location(latitude=lat, longitude=lon, name=name, country=country)


def resolve_location(query: str) -> Location:
    """
    Resolve a free-text place name to the single best-matching Location.

    Raises:
        ValueError: ``query`` is blank.
        NotFoundError: zero matches or an unreadable payload.
        ResolutionError: the request itself failed.
    """
    query = (query or "").strip()
    if not query:
        raise ValueError("query must not be empty")

    try:
        data = http_get_json(GEOCODING_URL, params=build_geocoding_params(query))
    except requests.exceptions.JSONDecodeError as err:
        raise NotFoundError(f"Unreadable geocoding response for {query!r}") from err
    except requests.RequestException as err:
        raise ResolutionError(f"Geocoding request failed for {query!r}: {err}") from err
    except ValueError as err:
        raise NotFoundError(f"Unreadable geocoding response for {query!r}") from err

    location = _parse_top_result(data, query)
    logger.info(
        "Resolved %r -> %s (%.4f, %.4f)",
        query,
        location.label,
        location.latitude,
        location.longitude,
    )
    return location
