"""Presenters: where an encoded location ends up.

The codec never renders anything itself. ``encode_and_present`` runs the
pipeline and hands the plain ``EncodedLocation`` record to a ``Presenter``.
A map UI, a QR printer or a chat bot only needs to implement ``present``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, TextIO

from grenloc.codec import encode
from grenloc.renderers.share import build_share_text, build_whatsapp_url
from grenloc.renderers.sticker import build_sticker_html
from grenloc.renderers.summary import build_summary_text

if TYPE_CHECKING:
    from grenloc.codec import ParishClassifier
    from grenloc.schemas import Coordinate, EncodedLocation

logger = logging.getLogger(__name__)


class Presenter(Protocol):
    """Output surface for encode results."""

    def present(self, location: EncodedLocation) -> None: ...


class ConsolePresenter:
    """Print a text summary, optionally with share links."""

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        diagnostics: bool = True,
        share: bool = False,
    ) -> None:
        self.stream = stream
        self.diagnostics = diagnostics
        self.share = share

    def present(self, location: EncodedLocation) -> None:
        out = self.stream or sys.stdout
        print(build_summary_text(location, diagnostics=self.diagnostics), file=out)
        if self.share:
            print(f"Share: {build_share_text(location)}", file=out)
            print(f"WhatsApp: {build_whatsapp_url(location)}", file=out)


class StickerPresenter:
    """Write a printable HTML sticker per code into ``output_dir``."""

    def __init__(self, output_dir: Path, *, auto_print: bool = True) -> None:
        self.output_dir = output_dir
        self.auto_print = auto_print
        self.written: list[Path] = []

    def path_for(self, location: EncodedLocation) -> Path:
        return self.output_dir / f"{location.code}.html"

    def present(self, location: EncodedLocation) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(location)
        path.write_text(build_sticker_html(location, auto_print=self.auto_print))
        self.written.append(path)
        logger.info("Wrote sticker %s", path)


class CompositePresenter:
    """Fan one result out to several presenters, in order."""

    def __init__(self, *presenters: Presenter) -> None:
        self.presenters = presenters

    def present(self, location: EncodedLocation) -> None:
        for presenter in self.presenters:
            presenter.present(location)


def encode_and_present(
    coord: Coordinate,
    presenter: Presenter,
    classifier: ParishClassifier | None = None,
) -> EncodedLocation:
    """Encode ``coord``, pass the result to ``presenter`` and return it."""
    location = encode(coord, classifier)
    presenter.present(location)
    return location
