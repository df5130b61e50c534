"""Shared test fixtures — fake HTTP sessions with canned Overpass answers."""

import pytest
import requests

from hospitalfinder.config import FinderSettings
from hospitalfinder.tools.overpass_tools import OverpassClient


class FakeResponse:
    def __init__(self, status_code=200, payload=None, json_error=None):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Returns queued responses in order; an exception in the queue is raised."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []
        self.headers = {}
        self.closed = False

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


def element(lat, lon, node_id=1, **tags):
    """Raw Overpass node; tag keys use '_' for ':' (addr_full -> addr:full)."""
    node = {"type": "node", "id": node_id, "tags": {k.replace("_", ":"): v for k, v in tags.items()}}
    if lat is not None:
        node["lat"] = lat
    if lon is not None:
        node["lon"] = lon
    return node


def overpass_payload(*elements):
    return {"version": 0.6, "generator": "Overpass API", "elements": list(elements)}


@pytest.fixture()
def settings() -> FinderSettings:
    return FinderSettings(timeout_s=5)


@pytest.fixture()
def make_client(settings):
    """Build an OverpassClient backed by a FakeSession with the given responses."""

    def _make(*responses):
        session = FakeSession(*responses)
        return OverpassClient(settings, session=session), session

    return _make
