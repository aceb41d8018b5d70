"""Share message and WhatsApp link."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from grenloc.schemas import EncodedLocation

WHATSAPP_SHARE_URL = "https://wa.me/?text="


def build_share_text(location: EncodedLocation) -> str:
    """Message body used when sharing a code."""
    return f"My GrenLoc code: {location.code} {location.maps_url}"


def build_whatsapp_url(location: EncodedLocation) -> str:
    """WhatsApp click-to-chat link prefilled with the share text."""
    return WHATSAPP_SHARE_URL + quote(build_share_text(location), safe="")
