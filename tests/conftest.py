"""
Pytest configuration and shared fixtures.

HTTP traffic is served by an in-process fake ApiAxle mounted on
``httpx.MockTransport``; no server is needed.
"""

import json
from typing import Any, Dict, List, Optional, Tuple, Union

import httpx
import pytest

from apiaxle import AxleClient, Settings

AXLE_ADDRESS = "http://axle.test:3000"


class FakeAxle:
    """Replies to requests by (method, path) and records everything it sees"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[Tuple[str, str], Tuple[int, Any]] = {}

    def reply(self, method: str, path: str, payload: Union[Dict[str, Any], str, bytes], status: int = 200):
        self.routes[(method, path)] = (status, payload)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(
                404,
                json={"results": {"error": {"type": "RouteNotFound", "message": "No route"}}}
            )
        status, payload = route
        if isinstance(payload, (bytes, str)):
            return httpx.Response(status, content=payload)
        return httpx.Response(status, json=payload)

    @property
    def last_request(self) -> Optional[httpx.Request]:
        return self.requests[-1] if self.requests else None

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def fake_axle():
    return FakeAxle()


@pytest.fixture
def settings():
    """Explicit settings so the environment cannot leak into tests"""
    return Settings(address=AXLE_ADDRESS, timeout=5)


@pytest.fixture
def client(fake_axle, settings):
    with AxleClient(AXLE_ADDRESS, transport=httpx.MockTransport(fake_axle), settings=settings) as axle:
        yield axle


@pytest.fixture
def sample_stats_response():
    return {
        "results": {
            "uncached": {
                "1364236800": {"200": 4, "404": 1},
                "1364240400": {"200": 2}
            },
            "cached": {
                "1364236800": {"200": 7}
            },
            "error": {}
        }
    }
