from __future__ import annotations

"""Lightweight HTTP client util.

Uses stdlib urllib; the only outbound call is a GET returning JSON. Retries are
opt-in (retries=0 means a single attempt).
"""
import http.client
import json
import logging
import time
import urllib.request
from typing import Any, Dict, Optional

logger = logging.getLogger("currency_converter.http")

USER_AGENT = "currency-converter/0.1"


class HttpError(Exception):
    pass


def get_json(
    url: str, *, timeout: float = 5.0, retries: int = 0, backoff: float = 0.5
) -> Dict[str, Any]:
    last_err: Optional[Exception] = None
    request = urllib.request.Request(
        url, headers={"Accept": "application/json", "User-Agent": USER_AGENT}
    )
    for attempt in range(retries + 1):
        try:
            with urllib.request.urlopen(request, timeout=timeout) as resp:  # nosec B310
                if resp.status >= 400:
                    raise HttpError(f"HTTP {resp.status} for {url}")
                data = json.loads(resp.read().decode("utf-8"))
                if not isinstance(data, dict):
                    raise HttpError(f"Expected a JSON object from {url}")
                return data
        except (
            OSError,  # URLError, timeouts, connection resets
            http.client.HTTPException,  # RemoteDisconnected, IncompleteRead
            HttpError,
            ValueError,
        ) as e:  # ValueError for JSON decode
            last_err = e
            logger.warning("GET %s failed (attempt %d/%d): %s", url, attempt + 1, retries + 1, e)
            if attempt == retries:
                break
            time.sleep(backoff * (2**attempt))
    raise HttpError(f"Failed to fetch JSON from {url}: {last_err}")
