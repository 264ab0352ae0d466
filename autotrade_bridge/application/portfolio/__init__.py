"""Portfolio use cases: positions, account summary, performance, orders."""

from .handlers import (
    EndpointQueryHandler,
    GetAccountSummaryHandler,
    GetOrdersHandler,
    GetPerformanceHandler,
    GetPositionsHandler,
)
from .queries import (
    GetAccountSummaryQuery,
    GetOrdersQuery,
    GetPerformanceQuery,
    GetPositionsQuery,
)

__all__ = [
    "GetPositionsQuery",
    "GetAccountSummaryQuery",
    "GetPerformanceQuery",
    "GetOrdersQuery",
    "EndpointQueryHandler",
    "GetPositionsHandler",
    "GetAccountSummaryHandler",
    "GetPerformanceHandler",
    "GetOrdersHandler",
]
