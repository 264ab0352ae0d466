"""Pytest configuration and fixtures."""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from autotrade_bridge.infrastructure.http import AutotradeClient

ACCOUNT_ID = "DU8489265"


class FakeAutotradeService:
    """Routes requests to canned ``(status, body)`` replies and records them.

    ``body`` may be any JSON value, or ``bytes`` for a raw (non-JSON) body.
    """

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []
        self.error: Callable[[httpx.Request], Exception] | None = None

    def reply(self, path: str, status_code: int, body: Any) -> None:
        self.routes[path] = (status_code, body)

    def fail_with(self, factory: Callable[[httpx.Request], Exception]) -> None:
        self.error = factory

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)

        status_code, body = self.routes.get(request.url.path, (404, {"error": "no route"}))
        if isinstance(body, bytes):
            return httpx.Response(status_code, content=body)
        return httpx.Response(
            status_code,
            content=json.dumps(body).encode(),
            headers={"content-type": "application/json"},
        )


@pytest.fixture
def account_id() -> str:
    return ACCOUNT_ID


@pytest.fixture
def service() -> FakeAutotradeService:
    return FakeAutotradeService()


@pytest_asyncio.fixture
async def client(service):
    """AutotradeClient wired to the fake service."""
    autotrade_client = AutotradeClient(transport=httpx.MockTransport(service))
    yield autotrade_client
    await autotrade_client.aclose()


@pytest.fixture
def sample_positions() -> list[dict[str, Any]]:
    return [
        {
            "symbol": "AAPL",
            "quantity": 10,
            "avg_price": 150.0,
            "current_price": 175.5,
            "market_value": 1755.0,
            "unrealized_pnl": 255.0,
            "weight": 0.6,
        },
        {
            "symbol": "MSFT",
            "quantity": 3,
            "avg_price": 380.0,
            "current_price": 390.0,
            "market_value": 1170.0,
            "unrealized_pnl": 30.0,
            "weight": 0.4,
        },
    ]


@pytest.fixture
def sample_portfolio(account_id, sample_positions) -> dict[str, Any]:
    return {
        "account_id": account_id,
        "currency": "USD",
        "cash_balance": 5000.0,
        "total_market_value": 2925.0,
        "total_cost_basis": 2640.0,
        "total_unrealized_pnl": 285.0,
        "total_positions": 2,
        "positions": sample_positions,
        "last_updated": "2026-10-19T14:30:00Z",
    }
