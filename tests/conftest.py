"""
Shared fixtures: an in-process stand-in for the Mapbox service.

``StubBackend`` is a ``requests`` transport adapter. Mount it on a session and
every request is answered locally, so tests exercise the real request
building, ``requests`` plumbing and response decoding without a network.
"""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any
from urllib.parse import unquote, urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from mapbox_client import Client, Settings
from mapbox_client.coordinates import shortest_float32
from mapbox_client.schemas import DurationRequest

TESTDATA = Path(__file__).parent / "testdata"

KNOWN_PLACES = {"Los Angeles": "LA"}

A = (13.41894, 52.50055)
B = (14.10293, 52.50055)
C = (13.50116, 53.10293)

# origin -> destination -> seconds; A -> C has no route
DURATIONS: dict[tuple[float, ...], dict[tuple[float, ...], float]] = {
    A: {B: 2910},
    B: {A: 2903, C: 5839},
    C: {A: 4695, B: 5745},
}


def places_path(short_id: str) -> Path:
    return TESTDATA / f"places-{short_id}.json"


def make_response(
    request: requests.PreparedRequest,
    status: int,
    reason: str,
    body: bytes = b"",
) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp.reason = reason
    resp.headers = CaseInsensitiveDict({"Content-Type": "application/json"})
    resp.raw = io.BytesIO(body)
    resp.encoding = "utf-8"
    resp.url = request.url or ""
    resp.request = request
    return resp


class StubBackend(BaseAdapter):
    """Answers ``/geocoding`` and ``/distances`` requests from local data."""

    def __init__(self, durations: dict[tuple[float, ...], dict[tuple[float, ...], float]]) -> None:
        super().__init__()
        self.durations = durations
        self.requests: list[requests.PreparedRequest] = []
        self.responses: list[requests.Response] = []

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:  # type: ignore[override]
        self.requests.append(request)
        path = urlsplit(request.url or "").path
        if "/distances" in path:
            resp = self._durations(request)
        elif "/geocoding" in path:
            resp = self._geocode(request)
        else:
            resp = make_response(request, 404, "Not Found")
        self.responses.append(resp)
        return resp

    def close(self) -> None:
        pass

    def _geocode(self, request: requests.PreparedRequest) -> requests.Response:
        if request.method != "GET":
            return make_response(request, 405, "Method Not Allowed")

        segment = urlsplit(request.url or "").path.rsplit("/", 1)[-1]
        place = unquote(segment).removesuffix(".json")
        short_id = KNOWN_PLACES.get(place)
        if short_id is None:
            return make_response(request, 404, "Not Found", b'{"message": "Not Found"}')
        return make_response(request, 200, "OK", places_path(short_id).read_bytes())

    def _durations(self, request: requests.PreparedRequest) -> requests.Response:
        if request.method != "POST":
            return make_response(request, 405, "Method Not Allowed")

        body = request.body if isinstance(request.body, bytes) else str(request.body).encode()
        locations = [
            tuple(shortest_float32(v) for v in row)
            for row in DurationRequest.model_validate_json(body).coordinates
        ]

        matrix: list[list[float | None]] = []
        for i, origin in enumerate(locations):
            row: list[float | None] = []
            for j, dest in enumerate(locations):
                if i == j or origin == dest:
                    row.append(0)
                else:
                    row.append(self.durations.get(origin, {}).get(dest))
            matrix.append(row)

        blob = json.dumps({"code": "Ok", "durations": matrix}).encode()
        return make_response(request, 200, "OK", blob)


class CannedAdapter(BaseAdapter):
    """Answers every request with the same status and body."""

    def __init__(self, status: int, reason: str, body: bytes = b"") -> None:
        super().__init__()
        self.status = status
        self.reason = reason
        self.body = body
        self.requests: list[requests.PreparedRequest] = []
        self.responses: list[requests.Response] = []

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:  # type: ignore[override]
        self.requests.append(request)
        resp = make_response(request, self.status, self.reason, self.body)
        self.responses.append(resp)
        return resp

    def close(self) -> None:
        pass


def session_with(adapter: BaseAdapter) -> requests.Session:
    s = requests.Session()
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    return s


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="env-token", _env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def backend() -> StubBackend:
    return StubBackend(DURATIONS)


@pytest.fixture
def client(backend: StubBackend, settings: Settings) -> Client:
    return Client(api_key="test-token", session=session_with(backend), settings=settings)
