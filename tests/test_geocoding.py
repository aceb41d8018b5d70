"""Tests for place-name geocoding."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest
import requests

from grenloc.schemas import Coordinate
from grenloc.services import geocoding
from grenloc.services.geocoding import clear_cache, geocode, search_places

GRAND_ANSE = [{"lat": "12.0233", "lon": "-61.7597", "display_name": "Grand Anse, St. George"}]


@pytest.fixture(autouse=True)
def _empty_cache() -> Iterator[None]:
    clear_cache()
    yield
    clear_cache()


def _mock_session(payload: object) -> MagicMock:
    session = MagicMock()
    session.get.return_value.json.return_value = payload
    return session


class TestSearchPlaces:
    def test_request_params(self) -> None:
        session = _mock_session(GRAND_ANSE)
        with patch.object(geocoding, "session", session):
            results = search_places("Grand Anse")

        assert results == GRAND_ANSE
        url = session.get.call_args[0][0]
        params = session.get.call_args[1]["params"]
        assert url == "https://nominatim.openstreetmap.org/search"
        assert params["q"] == "Grand Anse"
        assert params["countrycodes"] == "gd"
        assert params["bounded"] == 1
        assert params["viewbox"] == "-61.85,12.55,-61.35,11.95"
        assert params["format"] == "jsonv2"

    def test_timeout_from_settings(self) -> None:
        session = _mock_session(GRAND_ANSE)
        with (
            patch.object(geocoding, "session", session),
            patch.object(geocoding, "get_settings") as mock_settings,
        ):
            mock_settings.return_value.geocoder_url = "https://geo.example/search"
            mock_settings.return_value.geocoder_timeout = 3.5
            search_places("Grand Anse")
        assert session.get.call_args[0][0] == "https://geo.example/search"
        assert session.get.call_args[1]["timeout"] == 3.5

    def test_http_error_propagates(self) -> None:
        session = _mock_session([])
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError("503")
        with patch.object(geocoding, "session", session), pytest.raises(requests.HTTPError):
            search_places("Grand Anse")


class TestGeocode:
    def test_returns_top_result(self) -> None:
        with patch.object(geocoding, "session", _mock_session(GRAND_ANSE)):
            assert geocode("Grand Anse") == Coordinate(lat=12.0233, lng=-61.7597)

    def test_no_result(self) -> None:
        with patch.object(geocoding, "session", _mock_session([])):
            assert geocode("Atlantis") is None

    def test_empty_query_skips_request(self) -> None:
        session = _mock_session(GRAND_ANSE)
        with patch.object(geocoding, "session", session):
            assert geocode("   ") is None
        session.get.assert_not_called()

    def test_cache_by_normalized_query(self) -> None:
        session = _mock_session(GRAND_ANSE)
        with patch.object(geocoding, "session", session):
            first = geocode("Grand Anse")
            second = geocode("  grand   ANSE ")
        assert first == second
        assert session.get.call_count == 1

    def test_misses_are_cached(self) -> None:
        session = _mock_session([])
        with patch.object(geocoding, "session", session):
            geocode("Atlantis")
            geocode("atlantis")
        assert session.get.call_count == 1

    def test_clear_cache(self) -> None:
        session = _mock_session(GRAND_ANSE)
        with patch.object(geocoding, "session", session):
            geocode("Grand Anse")
            clear_cache()
            geocode("Grand Anse")
        assert session.get.call_count == 2
