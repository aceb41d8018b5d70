"""
Place-name search for Grenada.

Resolves free text ("Grand Anse", "Gouyave fish market") to a coordinate
that can be fed to ``grenloc.codec.encode``. Queries a Nominatim-compatible
``/search`` endpoint restricted to Grenada.

API docs: https://nominatim.org/release-docs/latest/api/Search/
"""

from __future__ import annotations

import logging
from typing import Any

from grenloc.config import get_settings
from grenloc.reference.geography import GRENADA_REGION_BBOX
from grenloc.schemas import Coordinate
from grenloc.services.http import session

logger = logging.getLogger(__name__)

COUNTRY_CODE = "gd"

# Runtime cache keyed by normalized query; misses are cached too
_geocode_cache: dict[str, Coordinate | None] = {}


def _normalize(query: str) -> str:
    return " ".join(query.split()).lower()


def search_places(query: str, *, limit: int = 1) -> list[dict[str, Any]]:
    """
    Run a raw place search.

    Args:
        query: Free-text place name.
        limit: Maximum number of results.

    Returns:
        The decoded JSON result list (may be empty).

    Raises:
        requests.HTTPError: On a non-2xx response.
    """
    settings = get_settings()
    params: dict[str, str | int] = {
        "q": query,
        "format": "jsonv2",
        "limit": limit,
        "countrycodes": COUNTRY_CODE,
        "viewbox": GRENADA_REGION_BBOX.as_viewbox(),
        "bounded": 1,
    }

    resp = session.get(settings.geocoder_url, params=params, timeout=settings.geocoder_timeout)
    resp.raise_for_status()
    results: list[dict[str, Any]] = resp.json()
    return results


def geocode(query: str) -> Coordinate | None:
    """
    Resolve a place name to a coordinate.

    Returns:
        The best match, or None for an empty query or no result.
    """
    normalized = _normalize(query)
    if not normalized:
        return None

    if normalized in _geocode_cache:
        return _geocode_cache[normalized]

    results = search_places(normalized)
    coord: Coordinate | None = None
    if results:
        top = results[0]
        coord = Coordinate(lat=float(top["lat"]), lng=float(top["lon"]))
        logger.debug("Geocoded %r -> %s (%s)", query, coord, top.get("display_name", ""))
    else:
        logger.info("No geocoding result for %r", query)

    _geocode_cache[normalized] = coord
    return coord


def clear_cache() -> None:
    """Clear the geocode cache."""
    _geocode_cache.clear()
