# weatherdash/api/http.py
import logging
from typing import Any

import requests

from weatherdash.config import HTTP_TIMEOUT_S, USER_AGENT
from weatherdash.utils import report_error

logger = logging.getLogger("weatherdash")


def http_get_json(
    url: str,
    params: dict[str, Any] | None = None,
    timeout: float = HTTP_TIMEOUT_S,
) -> Any:
    """
    One GET, decoded as JSON.

    No retry: every dashboard action maps to exactly one request per endpoint.
    Transport errors and non-2xx statuses raise ``requests.RequestException``;
    an undecodable body raises ``ValueError``.
    """
    headers = {"User-Agent": USER_AGENT}
    try:
        resp = requests.get(url, params=params, timeout=timeout, headers=headers)
        resp.raise_for_status()
        logger.debug("GET %s -> %s", resp.url, resp.status_code)
        return resp.json()
    except Exception as e:
        report_error(f"http_get_json: {url}", e)
        raise
