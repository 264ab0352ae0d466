"""Unit tests for the portfolio query handlers."""

import httpx
import pytest

from autotrade_bridge.application.portfolio import (
    GetAccountSummaryHandler,
    GetAccountSummaryQuery,
    GetOrdersHandler,
    GetOrdersQuery,
    GetPerformanceHandler,
    GetPerformanceQuery,
    GetPositionsHandler,
    GetPositionsQuery,
)
from autotrade_bridge.domain import AutotradeRequestError, PerformancePeriod


class TestGetPositionsHandler:
    @pytest.mark.asyncio
    async def test_returns_positions(self, client, service, account_id, sample_positions):
        service.reply("/api/v1/positions", 200, {"success": True, "data": sample_positions})

        response = await GetPositionsHandler(client).handle(GetPositionsQuery(account_id=account_id))

        assert response.success is True
        assert response.data == sample_positions
        assert response.error is None

    @pytest.mark.asyncio
    async def test_non_list_data_is_absent(self, client, service, account_id):
        service.reply("/api/v1/positions", 200, {"success": True, "data": {"symbol": "AAPL"}})

        response = await GetPositionsHandler(client).handle(GetPositionsQuery(account_id=account_id))

        assert response.success is True
        assert response.data is None

    @pytest.mark.asyncio
    async def test_upstream_failure(self, client, service, account_id):
        service.reply("/api/v1/positions", 500, {"success": False})

        response = await GetPositionsHandler(client).handle(GetPositionsQuery(account_id=account_id))

        assert response.success is False
        assert response.error == "Failed to fetch positions: Unknown error"


class TestGetAccountSummaryHandler:
    @pytest.mark.asyncio
    async def test_returns_summary(self, client, service, account_id, sample_portfolio):
        service.reply("/api/v1/portfolio", 200, {"success": True, "data": sample_portfolio})

        response = await GetAccountSummaryHandler(client).handle(
            GetAccountSummaryQuery(account_id=account_id)
        )

        assert response.data == sample_portfolio

    @pytest.mark.asyncio
    async def test_null_data_passes_through(self, client, service, account_id):
        service.reply("/api/v1/portfolio", 200, {"success": True, "data": None})

        response = await GetAccountSummaryHandler(client).handle(
            GetAccountSummaryQuery(account_id=account_id)
        )

        assert response.success is True
        assert response.data is None


class TestGetPerformanceHandler:
    @pytest.mark.asyncio
    async def test_without_period_sends_no_query_string(self, client, service, account_id):
        service.reply("/api/v1/portfolio/performance", 200, {"series": []})

        await GetPerformanceHandler(client).handle(GetPerformanceQuery(account_id=account_id))

        assert service.requests[0].url.query == b""

    @pytest.mark.asyncio
    async def test_enum_period(self, client, service, account_id):
        service.reply("/api/v1/portfolio/performance", 200, {"series": []})

        await GetPerformanceHandler(client).handle(
            GetPerformanceQuery(account_id=account_id, period=PerformancePeriod.YEAR_TO_DATE)
        )

        assert service.requests[0].url.params["period"] == "ytd"

    @pytest.mark.asyncio
    async def test_string_period_is_forwarded_unchanged(self, client, service, account_id):
        service.reply("/api/v1/portfolio/performance", 200, {"series": []})

        await GetPerformanceHandler(client).handle(
            GetPerformanceQuery(account_id=account_id, period="30d")
        )

        assert service.requests[0].url.params["period"] == "30d"

    @pytest.mark.asyncio
    async def test_failure_reports_http_status(self, client, service, account_id):
        service.reply("/api/v1/portfolio/performance", 404, {"error": "account not found"})

        response = await GetPerformanceHandler(client).handle(
            GetPerformanceQuery(account_id=account_id)
        )

        assert response.error == "Failed to fetch performance: HTTP 404"


class TestGetOrdersHandler:
    @pytest.mark.asyncio
    async def test_returns_orders(self, client, service, account_id):
        orders = [{"order_id": "1", "symbol": "AAPL", "side": "BUY", "status": "OPEN"}]
        service.reply("/api/v1/orders", 200, {"success": True, "data": orders})

        response = await GetOrdersHandler(client).handle(GetOrdersQuery(account_id=account_id))

        assert response.data == orders

    @pytest.mark.asyncio
    async def test_transport_failure_propagates(self, client, service, account_id):
        service.fail_with(lambda request: httpx.ConnectError("Connection refused", request=request))

        with pytest.raises(AutotradeRequestError):
            await GetOrdersHandler(client).handle(GetOrdersQuery(account_id=account_id))


class TestQueries:
    def test_period_value(self):
        assert GetPerformanceQuery(account_id="A").period_value is None
        assert GetPerformanceQuery(account_id="A", period="1y").period_value == "1y"
        assert GetPerformanceQuery(account_id="A", period=PerformancePeriod.ALL).period_value == "all"

    def test_queries_are_frozen(self):
        query = GetOrdersQuery(account_id="A")
        with pytest.raises(AttributeError):
            query.account_id = "B"
