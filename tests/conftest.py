"""Shared fixtures: stub OpenWeatherMap upstream and app builders."""

from typing import List, Optional, Tuple

import httpx
import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from weather_gateway.config import Settings
from weather_gateway.main import create_app
from weather_gateway.services.openweather_client import OpenWeatherClient

SAMPLE_PAYLOAD = {
    "coord": {"lon": 139.6917, "lat": 35.6895},
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
    "main": {"temp": 280.32, "feels_like": 278.1, "pressure": 1012, "humidity": 81},
    "name": "Tokyo",
}

API_KEY = "test-api-key"


class StubUpstream:
    """httpx MockTransport handler standing in for OpenWeatherMap."""

    def __init__(
        self,
        status_code: int = 200,
        json: Optional[dict] = None,
        content: Optional[bytes] = None,
        exc: Optional[Exception] = None,
    ):
        self.status_code = status_code
        self.json = SAMPLE_PAYLOAD if json is None and content is None else json
        self.content = content
        self.exc = exc
        self.requests: List[httpx.Request] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json)

    def client(self) -> OpenWeatherClient:
        return OpenWeatherClient(transport=httpx.MockTransport(self))


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_settings(**overrides) -> Settings:
    values = {
        "rate_limit_per_second": 1000,
        "openweathermap_api_url": "https://api.openweathermap.org/data/2.5/weather",
        "unit_of_measurement": "standard",
    }
    values.update(overrides)
    return Settings(**values)


def make_request(
    path: str = "/api/v1/weather",
    method: str = "GET",
    headers: Optional[List[Tuple[str, str]]] = None,
    query_string: str = "",
) -> Request:
    """Build a bare Starlette request without going through a server."""
    scope = {
        "type": "http",
        "method": method,
        "path": path,
        "root_path": "",
        "scheme": "http",
        "query_string": query_string.encode(),
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or [])],
        "server": ("testserver", 80),
    }
    return Request(scope)


@pytest.fixture
def upstream():
    return StubUpstream()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def make_test_client():
    """Factory for a TestClient around a fresh app (fresh rate limiter)."""

    def _make(stub: Optional[StubUpstream] = None, client: Optional[OpenWeatherClient] = None, **overrides):
        settings = make_settings(**overrides)
        if client is None:
            client = (stub or StubUpstream()).client()
        return TestClient(create_app(settings=settings, client=client))

    return _make
