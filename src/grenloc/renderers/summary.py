"""Plain-text summary of an encoded location."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from grenloc.schemas import EncodedLocation


def build_summary_text(location: EncodedLocation, *, diagnostics: bool = True) -> str:
    """Code, coordinate and parish, optionally followed by grid diagnostics."""
    lines = [
        location.code,
        str(location.coordinate),
        f"Parish: {location.parish.name} ({location.parish.code})",
        f"Map: {location.maps_url}",
    ]
    if diagnostics:
        lines += [
            f"Grid X: {location.grid_x}",
            f"Grid Y: {location.grid_y}",
            f"Lat metres: {location.lat_meters:.2f} m",
            f"Lng metres: {location.lng_meters:.2f} m",
        ]
    return "\n".join(lines)
