"""Portfolio query handlers.

Each handler issues one GET against its endpoint and normalizes the
result. Transport failures propagate as ``AutotradeTransportError``.
"""

from typing import Any, Generic, TypeVar

from autotrade_bridge.application.portfolio.queries import (
    GetAccountSummaryQuery,
    GetOrdersQuery,
    GetPerformanceQuery,
    GetPositionsQuery,
)
from autotrade_bridge.application.shared import Query, QueryHandler
from autotrade_bridge.config.logging import call_context, get_logger
from autotrade_bridge.domain.endpoints import ORDERS, PERFORMANCE, PORTFOLIO, POSITIONS, Endpoint
from autotrade_bridge.domain.exceptions import AutotradeTransportError
from autotrade_bridge.domain.response import NormalizedResponse
from autotrade_bridge.infrastructure.http import AutotradeClient

logger = get_logger(__name__)

TQuery = TypeVar("TQuery", bound=Query)


class EndpointQueryHandler(QueryHandler[TQuery, NormalizedResponse[Any]], Generic[TQuery]):
    """Fetch one endpoint and normalize its response.

    Subclasses set ``command`` and ``endpoint``, and override
    ``query_params`` when the endpoint takes a query string.
    """

    command: str
    endpoint: Endpoint

    def __init__(self, client: AutotradeClient) -> None:
        self.client = client

    def query_params(self, query: TQuery) -> dict[str, str] | None:
        return None

    def log_context(self, query: TQuery) -> dict[str, Any]:
        return {}

    async def handle(self, query: TQuery) -> NormalizedResponse[Any]:
        with call_context(self.command, query.account_id, **self.log_context(query)):
            logger.info(f"{self.command}.started", path=self.endpoint.path)

            try:
                status_code, body = await self.client.get_json(
                    self.endpoint.path,
                    params=self.query_params(query),
                )
            except AutotradeTransportError as e:
                logger.error(f"{self.command}.transport_failed", error=str(e))
                raise

            response = self.endpoint.normalize(status_code, body)

            logger.info(
                f"{self.command}.completed",
                status_code=status_code,
                success=response.success,
            )
            return response


class GetPositionsHandler(EndpointQueryHandler[GetPositionsQuery]):
    """Positions from ``/api/v1/positions``.

    Response data is a list of position objects (symbol, quantity,
    avg_price, current_price, market_value, unrealized_pnl, weight, ...),
    or None when the upstream ``data`` is missing or not a list.
    """

    command = "autotrade_get_positions"
    endpoint = POSITIONS


class GetAccountSummaryHandler(EndpointQueryHandler[GetAccountSummaryQuery]):
    """Portfolio snapshot from ``/api/v1/portfolio``."""

    command = "autotrade_get_account_summary"
    endpoint = PORTFOLIO


class GetPerformanceHandler(EndpointQueryHandler[GetPerformanceQuery]):
    """Performance from ``/api/v1/portfolio/performance``.

    The whole upstream body is the response data. Failures report the
    HTTP status only.
    """

    command = "autotrade_get_performance"
    endpoint = PERFORMANCE

    def query_params(self, query: GetPerformanceQuery) -> dict[str, str] | None:
        period = query.period_value
        if period is None:
            return None
        return {"period": period}

    def log_context(self, query: GetPerformanceQuery) -> dict[str, Any]:
        return {"period": query.period_value or "default"}


class GetOrdersHandler(EndpointQueryHandler[GetOrdersQuery]):
    """Current orders from ``/api/v1/orders``."""

    command = "autotrade_get_orders"
    endpoint = ORDERS
