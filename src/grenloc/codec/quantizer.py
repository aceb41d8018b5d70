"""50 m grid quantization.

Uses a flat metres-per-degree approximation that only holds near Grenada's
latitude; it is not a ``cos(lat)`` projection.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from grenloc.reference.grid import GRID_SIZE_M, LAT_TO_METERS, LNG_TO_METERS
from grenloc.schemas import GridCell

if TYPE_CHECKING:
    from grenloc.schemas import Coordinate


def _cell_index(degrees: float, meters: float, meters_per_degree: int) -> int:
    if math.isfinite(meters):
        return math.floor(meters / GRID_SIZE_M)
    # Product overflowed; a float this large is already a whole number
    return int(degrees) * meters_per_degree // GRID_SIZE_M


def quantize(coord: Coordinate) -> GridCell:
    """Map a coordinate to its grid cell.

    ``grid_x`` is derived from latitude and ``grid_y`` from longitude.
    """
    abs_lat = abs(coord.lat)
    abs_lng = abs(coord.lng)
    lat_meters = abs_lat * LAT_TO_METERS
    lng_meters = abs_lng * LNG_TO_METERS

    return GridCell(
        grid_x=_cell_index(abs_lat, lat_meters, LAT_TO_METERS),
        grid_y=_cell_index(abs_lng, lng_meters, LNG_TO_METERS),
        lat_meters=lat_meters,
        lng_meters=lng_meters,
    )
