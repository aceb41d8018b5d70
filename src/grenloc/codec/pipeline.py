"""Encode/locate pipelines built from the codec pieces.

encode: classify -> quantize -> format (+ maps link)
locate: normalize user text -> decode
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from grenloc.codec.classifier import default_classifier
from grenloc.codec.decoder import decode
from grenloc.codec.formatter import format_code
from grenloc.codec.quantizer import quantize
from grenloc.config import get_settings
from grenloc.schemas import EncodedLocation

if TYPE_CHECKING:
    from grenloc.codec.classifier import ParishClassifier
    from grenloc.schemas import Coordinate

logger = logging.getLogger(__name__)


def maps_url(coord: Coordinate, template: str | None = None) -> str:
    """Maps search link for the raw coordinate (also the QR payload)."""
    if template is None:
        template = get_settings().maps_search_url
    return template.format(lat=coord.lat, lng=coord.lng)


def encode(coord: Coordinate, classifier: ParishClassifier | None = None) -> EncodedLocation:
    """
    Encode a coordinate into a location code with its diagnostics.

    Args:
        coord: Point to encode. Any float lat/lng is accepted.
        classifier: Parish classifier (defaults to the bounding-box catalog).
    """
    parish = (classifier or default_classifier).classify(coord)
    cell = quantize(coord)
    code = format_code(parish.code, cell.grid_x, cell.grid_y)
    logger.debug("Encoded %s -> %s (grid %d, %d)", coord, code, cell.grid_x, cell.grid_y)

    return EncodedLocation(
        code=code,
        coordinate=coord,
        parish=parish,
        grid_x=cell.grid_x,
        grid_y=cell.grid_y,
        lat_meters=cell.lat_meters,
        lng_meters=cell.lng_meters,
        maps_url=maps_url(coord),
    )


def normalize_code(text: str) -> str:
    """Trim and upper-case typed input before decoding."""
    return text.strip().upper()


def locate(text: str) -> Coordinate | None:
    """Decode user-typed text, or None if it isn't a valid code."""
    return decode(normalize_code(text))
