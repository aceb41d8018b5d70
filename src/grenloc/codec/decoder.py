"""Location code search: code -> approximate coordinate.

Decoding walks 5 m steps from a fixed local origin. This is not the inverse
of the 50 m encoder grid; see ``grenloc.reference.grid``.
"""

from __future__ import annotations

import logging
import math

from grenloc.reference.grid import (
    CODE_PATTERN,
    METERS_PER_DEG_LAT,
    SEARCH_GRID_SIZE_M,
    SEARCH_ORIGIN_LAT,
    SEARCH_ORIGIN_LNG,
)
from grenloc.schemas import Coordinate, ParsedCode

logger = logging.getLogger(__name__)


def meters_per_deg_lng(lat: float) -> float:
    """Metres in one degree of longitude at ``lat``."""
    return METERS_PER_DEG_LAT * math.cos(math.radians(lat))


def parse_code(code: object) -> ParsedCode | None:
    """Split a code into parish and grid digits, or None if malformed.

    Matching is exact: no trimming, no case folding.
    """
    if not isinstance(code, str):
        return None
    match = CODE_PATTERN.fullmatch(code)
    if match is None:
        return None
    parish_code, digits = match.groups()
    return ParsedCode(parish_code=parish_code, gx=int(digits[:3]), gy=int(digits[3:]))


def decode(code: object) -> Coordinate | None:
    """
    Recover an approximate coordinate from a location code.

    ``gy`` moves north and ``gx`` moves east from the search origin. Any
    parish letters are accepted; they don't affect the position.

    Returns:
        The coordinate, or None when ``code`` is not a valid GrenLoc code.
    """
    parsed = parse_code(code)
    if parsed is None:
        logger.debug("Rejected location code %r", code)
        return None

    lat = SEARCH_ORIGIN_LAT + (parsed.gy * SEARCH_GRID_SIZE_M) / METERS_PER_DEG_LAT
    lng = SEARCH_ORIGIN_LNG + (parsed.gx * SEARCH_GRID_SIZE_M) / meters_per_deg_lng(lat)
    return Coordinate(lat=lat, lng=lng)
