"""Geographic bounds used by the parish catalog and the geocoder."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BoundingBox:
    """Lat/lng bounding box, inclusive on all four edges."""

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    def contains(self, lat: float, lng: float) -> bool:
        """True if the point lies inside or on the edge of the box."""
        return self.min_lat <= lat <= self.max_lat and self.min_lng <= lng <= self.max_lng

    def as_viewbox(self) -> str:
        """Return a Nominatim ``viewbox`` value (``west,north,east,south``)."""
        return f"{self.min_lng},{self.max_lat},{self.max_lng},{self.min_lat}"


# Map centre used when nothing has been selected yet
GRENADA_CENTER = (12.1165, -61.6790)

# Grenada, Carriacou and Petite Martinique with a small sea margin
GRENADA_REGION_BBOX = BoundingBox(min_lat=11.95, max_lat=12.55, min_lng=-61.85, max_lng=-61.35)
