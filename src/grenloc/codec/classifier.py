"""Parish detection.

Only bounding boxes are implemented today. Polygon boundaries (GeoJSON
point-in-polygon) slot in as another ``ParishClassifier`` and get selected
through ``get_classifier``; callers only ever see the protocol.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from grenloc.reference.parishes import PARISH_FALLBACK, PARISHES

if TYPE_CHECKING:
    from collections.abc import Sequence

    from grenloc.reference.parishes import ParishBoundary
    from grenloc.schemas import Coordinate, Parish

logger = logging.getLogger(__name__)

BOUNDARY_MODES = ("bbox", "geojson")


class ParishClassifier(Protocol):
    """Anything that can map a coordinate to a parish."""

    def classify(self, coord: Coordinate) -> Parish: ...


class BoundingBoxClassifier:
    """First-match classification over an ordered list of parish boxes."""

    def __init__(
        self,
        boundaries: Sequence[ParishBoundary] = PARISHES,
        fallback: Parish = PARISH_FALLBACK,
    ) -> None:
        self.boundaries = tuple(boundaries)
        self.fallback = fallback

    def classify(self, coord: Coordinate) -> Parish:
        for boundary in self.boundaries:
            if boundary.bbox.contains(coord.lat, coord.lng):
                return boundary.parish
        return self.fallback


#: Shared default instance (stateless, safe to reuse)
default_classifier = BoundingBoxClassifier()


def classify(coord: Coordinate) -> Parish:
    """Classify ``coord`` with the default bounding-box catalog."""
    return default_classifier.classify(coord)


def get_classifier(mode: str = "bbox") -> ParishClassifier:
    """
    Return the classifier for a boundary mode.

    Args:
        mode: ``"bbox"`` or ``"geojson"``. Polygon data isn't shipped yet, so
            ``"geojson"`` logs a warning and uses the bounding boxes.

    Raises:
        ValueError: If ``mode`` is not a known boundary mode.
    """
    if mode not in BOUNDARY_MODES:
        raise ValueError(f"Unknown boundary mode {mode!r}; expected one of {BOUNDARY_MODES}")
    if mode == "geojson":
        # TODO: load parish polygons and add a point-in-polygon classifier
        logger.warning("GeoJSON boundary mode not yet available, falling back to bbox")
    return default_classifier
