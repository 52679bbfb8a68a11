"""Tests for encoding request filters as query parameters."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import BaseModel

from mapbox_client.errors import EncodingError
from mapbox_client.query import to_query_params
from mapbox_client.schemas import GeocodeRequest, GeocodeType


class TestOmitEmpty:
    """Unset and zero-valued fields never reach the URL."""

    def test_none(self) -> None:
        assert to_query_params(None) == []

    def test_empty_request(self) -> None:
        assert to_query_params(GeocodeRequest()) == []

    def test_only_limit(self) -> None:
        assert to_query_params(GeocodeRequest(limit=5)) == [("limit", "5")]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"limit": 0},
            {"autocomplete": False},
            {"country": []},
            {"types": []},
        ],
    )
    def test_zero_values_omitted(self, kwargs: dict[str, Any]) -> None:
        assert to_query_params(GeocodeRequest(**kwargs)) == []


class TestValueTypes:
    def test_string_list_one_param_per_element(self) -> None:
        params = to_query_params(GeocodeRequest(country=["us", "ca"]))
        assert params == [("country", "us"), ("country", "ca")]

    def test_types_use_wire_names(self) -> None:
        params = to_query_params(GeocodeRequest(types=[GeocodeType.PLACE, GeocodeType.POI_LANDMARK]))
        assert params == [("types", "place"), ("types", "poi.landmark")]

    def test_bool_true(self) -> None:
        assert to_query_params(GeocodeRequest(autocomplete=True)) == [("autocomplete", "true")]

    def test_bbox_fixed_point(self) -> None:
        params = to_query_params(GeocodeRequest(bbox=[-118.5, 33.9, -118.1, 34.2]))
        assert params == [
            ("bbox", "-118.500000"),
            ("bbox", "33.900000"),
            ("bbox", "-118.100000"),
            ("bbox", "34.200000"),
        ]

    def test_bbox_by_field_name(self) -> None:
        req = GeocodeRequest(bounding_box=[0, 1, 2, 3])
        assert [k for k, _ in to_query_params(req)] == ["bbox"] * 4

    def test_proximity_per_coordinate_only(self) -> None:
        """A coordinate pair yields one parameter per coordinate, no whole-pair duplicate."""
        params = to_query_params(GeocodeRequest(proximity=[-77.0366, 38.8971]))
        assert params == [("proximity", "-77.036600"), ("proximity", "38.897100")]

    def test_field_order_is_stable(self) -> None:
        req = GeocodeRequest(autocomplete=True, limit=2, country=["us"])
        assert [k for k, _ in to_query_params(req)] == ["country", "limit", "autocomplete"]


class TestArbitraryObjects:
    def test_mapping(self) -> None:
        params = to_query_params({"language": "en", "limit": 3, "fuzzyMatch": False})
        assert params == [("language", "en"), ("limit", "3")]

    def test_unsupported_values_dropped(self) -> None:
        params = to_query_params({"nested": {"a": 1}, "mixed": [1, "a"], "ratio": 0.5, "ok": "y"})
        assert params == [("ok", "y")]

    def test_other_model(self) -> None:
        class Filters(BaseModel):
            language: str | None = None
            worldview: str = "us"

        assert to_query_params(Filters()) == [("worldview", "us")]

    def test_unserializable_raises(self) -> None:
        with pytest.raises(EncodingError):
            to_query_params({"when": object()})


class TestGeocodeRequestValidation:
    def test_bbox_needs_four_values(self) -> None:
        with pytest.raises(ValueError):
            GeocodeRequest(bbox=[1.0, 2.0])

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(ValueError):
            GeocodeRequest(limit=-1)
