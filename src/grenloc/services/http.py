"""
Shared HTTP session with automatic retry and backoff.

Retries transient failures (connection resets, 429/502/503/504) with
exponential backoff. Callers pass their own ``timeout=``; the geocoder takes
it from settings.

Usage::

    from grenloc.services.http import session

    resp = session.get(url, params={...}, timeout=15)
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from grenloc import __version__

#: Public geocoders rate-limit aggressively, hence 429.
DEFAULT_RETRY = Retry(
    total=3,
    backoff_factor=1,  # 0s, 1s, 2s between retries
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD"],
    raise_on_status=False,  # let resp.raise_for_status() handle it
)

# Nominatim's usage policy requires an identifying User-Agent
USER_AGENT = f"grenloc/{__version__}"


def create_session(retry: Retry | None = None) -> requests.Session:
    """Build a ``requests.Session`` with the retry adapter and User-Agent set."""
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    for prefix in ("https://", "http://"):
        s.mount(prefix, adapter)
    s.headers["User-Agent"] = USER_AGENT
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session()
