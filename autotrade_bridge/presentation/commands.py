"""Caller-facing commands.

Data source: Autotrade Integration Service (``AUTOTRADE_API_BASE``).

Available commands:
- ``autotrade_get_positions`` - positions for an account
- ``autotrade_get_account_summary`` - account portfolio summary
- ``autotrade_get_performance`` - performance data
- ``autotrade_get_orders`` - current orders

Each returns a ``NormalizedResponse`` or raises ``AutotradeTransportError``
when the service is unreachable, times out or returns a non-JSON body.
Pass ``client`` to reuse one connection pool; otherwise each call opens
and closes its own.
"""

from typing import Any

from autotrade_bridge.application.portfolio import (
    EndpointQueryHandler,
    GetAccountSummaryHandler,
    GetAccountSummaryQuery,
    GetOrdersHandler,
    GetOrdersQuery,
    GetPerformanceHandler,
    GetPerformanceQuery,
    GetPositionsHandler,
    GetPositionsQuery,
)
from autotrade_bridge.application.shared import Query
from autotrade_bridge.domain.enums import PerformancePeriod
from autotrade_bridge.domain.response import NormalizedResponse
from autotrade_bridge.infrastructure.http import AutotradeClient


async def _run(
    handler_class: type[EndpointQueryHandler[Any]],
    query: Query,
    client: AutotradeClient | None,
) -> NormalizedResponse[Any]:
    if client is not None:
        return await handler_class(client).handle(query)

    async with AutotradeClient() as owned_client:
        return await handler_class(owned_client).handle(query)


async def autotrade_get_positions(
    account_id: str,
    *,
    client: AutotradeClient | None = None,
) -> NormalizedResponse[list[Any]]:
    """Get positions for an Autotrade account.

    Args:
        account_id: The Autotrade account ID (e.g. "DU8489265").
        client: Optional shared client.

    Returns:
        NormalizedResponse whose data is a list of position objects.
    """
    return await _run(GetPositionsHandler, GetPositionsQuery(account_id=account_id), client)


async def autotrade_get_account_summary(
    account_id: str,
    *,
    client: AutotradeClient | None = None,
) -> NormalizedResponse[Any]:
    """Get the account portfolio summary.

    Data holds account_id, total_market_value, total_cost_basis,
    total_unrealized_pnl, total_positions, positions, last_updated.
    """
    return await _run(
        GetAccountSummaryHandler,
        GetAccountSummaryQuery(account_id=account_id),
        client,
    )


async def autotrade_get_performance(
    account_id: str,
    period: PerformancePeriod | str | None = None,
    *,
    client: AutotradeClient | None = None,
) -> NormalizedResponse[Any]:
    """Get performance data for an account.

    Args:
        account_id: The Autotrade account ID.
        period: Optional period: "1d", "7d", "30d", "ytd", "1y", "all".
        client: Optional shared client.

    Returns:
        NormalizedResponse whose data is the whole upstream body
        (series, currency, period, annualized_return, ...).
    """
    return await _run(
        GetPerformanceHandler,
        GetPerformanceQuery(account_id=account_id, period=period),
        client,
    )


async def autotrade_get_orders(
    account_id: str,
    *,
    client: AutotradeClient | None = None,
) -> NormalizedResponse[Any]:
    """Get current orders for an account."""
    return await _run(GetOrdersHandler, GetOrdersQuery(account_id=account_id), client)
