"""Printable sticker page for a location code.

QR images aren't rendered here; the card carries the QR payload (the maps
link) as text instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from grenloc.renderers import render_template

if TYPE_CHECKING:
    from grenloc.schemas import EncodedLocation


def build_sticker_html(location: EncodedLocation, *, auto_print: bool = True) -> str:
    """Render a standalone HTML page for printing.

    Args:
        location: Encoded location to print.
        auto_print: Open the browser print dialog when the page loads.
    """
    return render_template(
        "sticker.html.j2",
        code=location.code,
        parish=location.parish,
        coordinate=str(location.coordinate),
        maps_url=location.maps_url,
        auto_print=auto_print,
    )
