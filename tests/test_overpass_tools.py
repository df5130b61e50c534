"""Tests for hospitalfinder.tools.overpass_tools."""

import pytest
import requests

from hospitalfinder.exceptions import OverpassError
from hospitalfinder.tools.overpass_tools import (
    around_filter,
    bbox_filter,
    build_hospital_query,
)
from tests.conftest import FakeResponse, element, overpass_payload


class TestQueryBuilding:
    def test_around_query(self):
        query = build_hospital_query(around_filter(28.6, 77.2, 10000))
        assert query.startswith("[out:json];")
        assert 'node["amenity"="hospital"](around:10000,28.6,77.2);' in query
        assert query.rstrip().endswith("out body;")

    def test_bbox_query(self):
        query = build_hospital_query(bbox_filter((28.404181, 76.838394, 28.88303, 77.343689)))
        assert 'node["amenity"="hospital"](28.404181,76.838394,28.88303,77.343689);' in query


class TestFetchElements:
    def test_returns_elements(self, make_client):
        client, session = make_client(FakeResponse(payload=overpass_payload(element(28.6, 77.2, name="A"))))
        elements = client.hospitals_around(28.6, 77.2, 5000)
        assert len(elements) == 1
        call = session.calls[0]
        assert call["url"] == "https://overpass-api.de/api/interpreter"
        assert "around:5000,28.6,77.2" in call["params"]["data"]
        assert call["timeout"] == 5

    def test_sets_user_agent(self, make_client):
        client, session = make_client()
        assert session.headers["User-Agent"] == "hospitalfinder/0.1"

    def test_missing_elements_is_empty(self, make_client):
        client, _ = make_client(FakeResponse(payload={"version": 0.6}))
        assert client.hospitals_in_bbox((1, 2, 3, 4)) == []

    def test_null_elements_is_empty(self, make_client):
        client, _ = make_client(FakeResponse(payload={"elements": None}))
        assert client.hospitals_in_bbox((1, 2, 3, 4)) == []

    def test_http_error_status(self, make_client):
        client, _ = make_client(FakeResponse(status_code=504))
        with pytest.raises(OverpassError) as excinfo:
            client.hospitals_around(28.6, 77.2, 1000)
        assert excinfo.value.status_code == 504
        assert str(excinfo.value) == "API Error: 504"

    def test_network_error(self, make_client):
        client, _ = make_client(requests.ConnectionError("connection refused"))
        with pytest.raises(OverpassError, match="connection refused"):
            client.hospitals_around(28.6, 77.2, 1000)

    def test_invalid_json(self, make_client):
        client, _ = make_client(FakeResponse(json_error=ValueError("Expecting value")))
        with pytest.raises(OverpassError, match="Invalid JSON"):
            client.hospitals_around(28.6, 77.2, 1000)

    @pytest.mark.parametrize("elements", [{"remark": "runtime error"}, ["node"], [{"lat": 1}, 7], "elements"])
    def test_malformed_elements(self, make_client, elements):
        client, _ = make_client(FakeResponse(payload={"elements": elements}))
        with pytest.raises(OverpassError, match="Unexpected response shape"):
            client.hospitals_in_bbox((1, 2, 3, 4))

    def test_non_object_json(self, make_client):
        client, _ = make_client(FakeResponse(payload=["not", "an", "object"]))
        with pytest.raises(OverpassError):
            client.hospitals_around(28.6, 77.2, 1000)

    def test_context_manager_closes_session(self, make_client):
        client, session = make_client()
        with client:
            pass
        assert session.closed
