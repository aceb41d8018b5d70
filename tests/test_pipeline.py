"""Tests for the encode/locate pipelines."""

from __future__ import annotations

import math
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from grenloc.codec import (
    decode,
    encode,
    format_code,
    locate,
    maps_url,
    normalize_code,
    parse_code,
    quantize,
)
from grenloc.codec.classifier import classify
from grenloc.schemas import Coordinate, Parish

GRENADA_CENTER = Coordinate(lat=12.1165, lng=-61.6790)


class _FixedClassifier:
    def __init__(self, parish: Parish) -> None:
        self.parish = parish
        self.calls: list[Coordinate] = []

    def classify(self, coord: Coordinate) -> Parish:
        self.calls.append(coord)
        return self.parish


class TestEncode:
    """classify -> quantize -> format."""

    def test_grenada_center(self) -> None:
        result = encode(GRENADA_CENTER)
        assert result.code == "GN-STA-976336"
        assert result.parish == Parish(code="STA", name="St. Andrew")
        assert result.coordinate == GRENADA_CENTER
        assert (result.grid_x, result.grid_y) == (26976, 134336)
        assert result.lat_meters == pytest.approx(1348808.78)
        assert result.lng_meters == pytest.approx(6716843.1)

    def test_matches_composed_steps(self) -> None:
        coord = Coordinate(lat=12.05, lng=-61.75)
        cell = quantize(coord)
        expected = format_code(classify(coord).code, cell.grid_x, cell.grid_y)
        assert encode(coord).code == expected

    def test_maps_url_uses_raw_coordinate(self) -> None:
        result = encode(GRENADA_CENTER)
        assert result.maps_url == "https://www.google.com/maps/search/?api=1&query=12.1165,-61.679"

    def test_offshore(self) -> None:
        assert encode(Coordinate(lat=0, lng=0)).code == "GN-GND-000000"

    def test_total_over_nonsense_input(self) -> None:
        assert encode(Coordinate(lat=1000, lng=0)).code == "GN-GND-400000"

    def test_custom_classifier(self) -> None:
        classifier = _FixedClassifier(Parish(code="XYZ", name="Test"))
        result = encode(GRENADA_CENTER, classifier)
        assert result.code == "GN-XYZ-976336"
        assert classifier.calls == [GRENADA_CENTER]

    def test_deterministic(self) -> None:
        assert encode(GRENADA_CENTER) == encode(GRENADA_CENTER)

    def test_result_is_frozen(self) -> None:
        result = encode(GRENADA_CENTER)
        with pytest.raises(ValueError):
            result.code = "GN-STG-000000"  # type: ignore[misc]


class TestMapsUrl:
    def test_custom_template(self) -> None:
        url = maps_url(Coordinate(lat=12.0, lng=-61.5), "geo:{lat},{lng}")
        assert url == "geo:12.0,-61.5"

    def test_template_from_settings(self) -> None:
        with patch("grenloc.codec.pipeline.get_settings") as mock_settings:
            mock_settings.return_value.maps_search_url = "https://maps.example/?q={lat},{lng}"
            url = maps_url(Coordinate(lat=12.0, lng=-61.5))
        assert url == "https://maps.example/?q=12.0,-61.5"


class TestLocate:
    """User input normalization + decode."""

    def test_normalize(self) -> None:
        assert normalize_code("  gn-stg-482731 \n") == "GN-STG-482731"

    def test_locate_normalizes(self) -> None:
        assert locate("  gn-stg-482731 ") == decode("GN-STG-482731")

    def test_locate_invalid(self) -> None:
        assert locate("not a code") is None

    def test_decode_of_encode_is_not_identity(self) -> None:
        code = encode(GRENADA_CENTER).code
        back = decode(code)
        assert back is not None
        # The search grid lands ~13 km south of the original point
        assert abs(back.lat - GRENADA_CENTER.lat) > 0.05


class TestNonFiniteInput:
    """Coordinates must be finite; every buildable Coordinate encodes."""

    @pytest.mark.parametrize(
        ("lat", "lng"),
        [(math.nan, -61.7), (12.1, math.nan), (math.inf, -61.7), (12.1, -math.inf)],
    )
    def test_rejected_at_construction(self, lat: float, lng: float) -> None:
        with pytest.raises(ValidationError):
            Coordinate(lat=lat, lng=lng)

    def test_huge_finite_values_still_encode(self) -> None:
        result = encode(Coordinate(lat=1e308, lng=-1e308))
        assert parse_code(result.code) is not None
        assert result.parish.code == "GND"
