"""Parish catalog.

Boxes are a coarse approximation of the real parish boundaries and overlap
in places. They are evaluated in the order listed; the first match wins, so
the order of ``PARISHES`` must not change.
"""

from __future__ import annotations

from dataclasses import dataclass

from grenloc.reference.geography import BoundingBox
from grenloc.schemas import Parish


@dataclass(frozen=True)
class ParishBoundary:
    """A parish paired with its bounding box."""

    parish: Parish
    bbox: BoundingBox


PARISHES: tuple[ParishBoundary, ...] = (
    # SW, including St. George's and Grand Anse
    ParishBoundary(
        Parish(code="STG", name="St. George"),
        BoundingBox(min_lat=11.97, max_lat=12.10, min_lng=-61.83, max_lng=-61.65),
    ),
    # NE interior and east coast
    ParishBoundary(
        Parish(code="STA", name="St. Andrew"),
        BoundingBox(min_lat=12.03, max_lat=12.23, min_lng=-61.70, max_lng=-61.58),
    ),
    # SE coast and interior
    ParishBoundary(
        Parish(code="SDA", name="St. David"),
        BoundingBox(min_lat=11.97, max_lat=12.06, min_lng=-61.67, max_lng=-61.58),
    ),
    # Northern tip
    ParishBoundary(
        Parish(code="STP", name="St. Patrick"),
        BoundingBox(min_lat=12.18, max_lat=12.28, min_lng=-61.72, max_lng=-61.58),
    ),
    # NW coast
    ParishBoundary(
        Parish(code="STM", name="St. Mark"),
        BoundingBox(min_lat=12.08, max_lat=12.22, min_lng=-61.78, max_lng=-61.68),
    ),
    # West-central coast
    ParishBoundary(
        Parish(code="STJ", name="St. John"),
        BoundingBox(min_lat=12.04, max_lat=12.14, min_lng=-61.80, max_lng=-61.70),
    ),
)

# Open sea, Carriacou and Petite Martinique
PARISH_FALLBACK = Parish(code="GND", name="Grenada (Offshore / Other Islands)")

PARISHES_BY_CODE: dict[str, Parish] = {
    **{b.parish.code: b.parish for b in PARISHES},
    PARISH_FALLBACK.code: PARISH_FALLBACK,
}
