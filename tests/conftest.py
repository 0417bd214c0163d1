"""Shared fixtures for cse_market tests."""

from typing import Any

import aiohttp
import pytest

from cse_market.data import CSEClient, ResponseCache
from cse_market.ui import Page


class FakeClock:
    """Manually advanced time source (seconds)."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse used as an async context manager."""

    def __init__(self, payload: Any = None, status: int = 200) -> None:
        self.status = status
        self._payload = payload

    async def json(self, content_type: str | None = "application/json") -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        return None


class FakeSession:
    """
    Stand-in for aiohttp.ClientSession.

    Routes are keyed by endpoint path; a route may be a payload, a
    FakeResponse, or an exception instance to raise on post().
    """

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self.routes = routes or {}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append((url, kwargs))
        path = "/" + url.rsplit("/", 1)[-1]
        if path not in self.routes:
            raise aiohttp.ClientConnectionError(f"no route for {url}")
        route = self.routes[path]
        if isinstance(route, Exception):
            raise route
        if isinstance(route, FakeResponse):
            return route
        return FakeResponse(route)

    def calls_to(self, path: str) -> int:
        return sum(1 for url, _ in self.calls if url.endswith(path))


SAMPLE_SUMMARY = {
    "ASPI": 12345.678,
    "ASPIChange": -0.456,
    "turnover": 2_450_000_000,
    "marketCap": 4_120_000_000_000,
}

SAMPLE_GAINERS = [
    {"symbol": "JKH.N0000", "price": 195.5, "change": 4.5, "percentageChange": 2.356},
    {"symbol": "COMB.N0000", "price": 98.0, "change": 2.0, "percentageChange": 2.083},
    {"name": "HNB.N0000", "lastPrice": 210.25, "change": 3.25, "percentageChange": 1.57},
    {"symbol": "SAMP.N0000", "price": 60.1, "change": 0.9, "percentageChange": 1.52},
    {"symbol": "DIAL.N0000", "price": 12.3, "change": 0.1, "percentageChange": 0.82},
    {"symbol": "LOLC.N0000", "price": 500.0, "change": 3.0, "percentageChange": 0.6},
]

SAMPLE_LOSERS = [
    {"symbol": "EXPO.N0000", "price": 140.0, "change": -7.0, "percentageChange": -4.76},
    {"symbol": "CARG.N0000", "price": 355.0, "change": -10.0, "percentageChange": -2.74},
    {"symbol": "LIOC.N0000", "price": 120.0, "change": -2.5, "percentageChange": -2.04},
    {"symbol": "HAYL.N0000", "price": 80.0, "change": -1.0, "percentageChange": -1.23},
]

SAMPLE_ACTIVE = [
    {"symbol": "JKH.N0000", "price": 195.5, "change": 4.5, "percentageChange": 2.356},
    {"symbol": "EXPO.N0000", "price": 140.0, "change": -7.0, "percentageChange": -4.76},
]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def routes() -> dict[str, Any]:
    """Healthy API routes; tests mutate this to simulate failures."""
    return {
        "/marketSummery": dict(SAMPLE_SUMMARY),
        "/topGainers": list(SAMPLE_GAINERS),
        "/topLosers": list(SAMPLE_LOSERS),
        "/mostActive": list(SAMPLE_ACTIVE),
    }


@pytest.fixture
def response_factory() -> type[FakeResponse]:
    return FakeResponse


@pytest.fixture
def fake_session(routes) -> FakeSession:
    return FakeSession(routes)


@pytest.fixture
def client(fake_session, clock) -> CSEClient:
    return CSEClient(
        base_url="https://www.cse.lk/api",
        session=fake_session,  # type: ignore[arg-type]
        cache=ResponseCache(timeout_ms=30_000, clock=clock),
    )


@pytest.fixture
def page() -> Page:
    return Page.default()
