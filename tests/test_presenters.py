"""Tests for presenters."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from grenloc.presenters import (
    CompositePresenter,
    ConsolePresenter,
    StickerPresenter,
    encode_and_present,
)
from grenloc.schemas import Coordinate, EncodedLocation, Parish

if TYPE_CHECKING:
    from pathlib import Path

GRENADA_CENTER = Coordinate(lat=12.1165, lng=-61.6790)


class RecordingPresenter:
    def __init__(self, log: list[str] | None = None, name: str = "rec") -> None:
        self.received: list[EncodedLocation] = []
        self.log = log if log is not None else []
        self.name = name

    def present(self, location: EncodedLocation) -> None:
        self.received.append(location)
        self.log.append(self.name)


class TestEncodeAndPresent:
    def test_hands_result_to_presenter(self) -> None:
        presenter = RecordingPresenter()
        result = encode_and_present(GRENADA_CENTER, presenter)
        assert presenter.received == [result]
        assert result.code == "GN-STA-976336"

    def test_custom_classifier(self) -> None:
        class Fixed:
            def classify(self, coord: Coordinate) -> Parish:
                return Parish(code="TST", name="Test")

        presenter = RecordingPresenter()
        result = encode_and_present(GRENADA_CENTER, presenter, Fixed())
        assert result.parish.code == "TST"


class TestConsolePresenter:
    def test_prints_summary(self) -> None:
        out = StringIO()
        encode_and_present(GRENADA_CENTER, ConsolePresenter(out))
        text = out.getvalue()
        assert text.startswith("GN-STA-976336\n")
        assert "Grid X: 26976" in text
        assert "WhatsApp" not in text

    def test_share_links(self) -> None:
        out = StringIO()
        encode_and_present(GRENADA_CENTER, ConsolePresenter(out, diagnostics=False, share=True))
        text = out.getvalue()
        assert "Grid X" not in text
        assert "Share: My GrenLoc code: GN-STA-976336" in text
        assert "WhatsApp: https://wa.me/?text=" in text


class TestStickerPresenter:
    def test_writes_file(self, tmp_path: Path) -> None:
        presenter = StickerPresenter(tmp_path / "out")
        encode_and_present(GRENADA_CENTER, presenter)

        path = tmp_path / "out" / "GN-STA-976336.html"
        assert presenter.written == [path]
        assert "GN-STA-976336" in path.read_text()

    def test_overwrites_same_code(self, tmp_path: Path) -> None:
        presenter = StickerPresenter(tmp_path, auto_print=False)
        encode_and_present(GRENADA_CENTER, presenter)
        encode_and_present(GRENADA_CENTER, presenter)
        assert len(list(tmp_path.iterdir())) == 1
        assert "window.print" not in (tmp_path / "GN-STA-976336.html").read_text()


class TestCompositePresenter:
    def test_fans_out_in_order(self) -> None:
        log: list[str] = []
        first = RecordingPresenter(log, "first")
        second = RecordingPresenter(log, "second")
        result = encode_and_present(GRENADA_CENTER, CompositePresenter(first, second))
        assert log == ["first", "second"]
        assert first.received == second.received == [result]
