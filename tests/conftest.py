from __future__ import annotations

import copy
from typing import Any, List

import httpx
import pytest
from fastapi.testclient import TestClient

from anz_weather.http.client import get_http_client
from anz_weather.main import app
from anz_weather.settings import S


HOURLY_PAYLOAD = {
    "latitude": -36.875,
    "longitude": 174.75,
    "generationtime_ms": 0.05,
    "timezone": "Pacific/Auckland",
    "hourly_units": {"time": "iso8601", "temperature_2m": "°C"},
    "hourly": {
        "time": ["2025-01-21T00:00", "2025-01-21T01:00"],
        "temperature_2m": [20.5, 19.8],
        "precipitation": [0, 0.5],
        "windspeed_10m": [15.2, 18.3],
    },
}

DAILY_PAYLOAD = {
    "latitude": -33.875,
    "longitude": 151.25,
    "daily": {
        "time": ["2025-01-21", "2025-01-22"],
        "temperature_2m_max": [25.5, 36.2],
        "temperature_2m_min": [18.3, 19.1],
        "precipitation_sum": [0, 55.0],
        "windspeed_10m_max": [20.1, 22.5],
    },
}


class FakeUpstream:
    """Serves queued outcomes in order; the last one repeats once the queue drains."""

    def __init__(self) -> None:
        self.calls: List[httpx.Request] = []
        self._outcomes: List[Any] = []

    def queue(self, *outcomes: Any) -> "FakeUpstream":
        self._outcomes.extend(outcomes)
        return self

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if not self._outcomes:
            return httpx.Response(200, json=HOURLY_PAYLOAD)
        outcome = self._outcomes.pop(0) if len(self._outcomes) > 1 else self._outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, int):
            return httpx.Response(outcome, json={"error": True, "reason": "boom"})
        if isinstance(outcome, httpx.Response):
            return outcome
        return httpx.Response(200, json=outcome)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self._handle))


@pytest.fixture()
def hourly_payload() -> dict:
    return copy.deepcopy(HOURLY_PAYLOAD)


@pytest.fixture()
def daily_payload() -> dict:
    return copy.deepcopy(DAILY_PAYLOAD)


@pytest.fixture()
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture()
def no_backoff(monkeypatch):
    monkeypatch.setattr(S, "retry_base_delay_seconds", 0.0)


@pytest.fixture()
def api(upstream, no_backoff):
    fake_client = upstream.client()
    app.dependency_overrides[get_http_client] = lambda: fake_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
