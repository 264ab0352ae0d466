"""Autotrade Bridge.

Async commands that proxy the Autotrade Integration Service and return a
uniform ``{success, data, error, timestamp}`` envelope.

Usage:
    from autotrade_bridge import autotrade_get_positions

    response = await autotrade_get_positions("DU8489265")
    if response.success:
        ...
"""

from .domain import AutotradeTransportError, NormalizedResponse, PerformancePeriod
from .infrastructure.http import AutotradeClient
from .presentation import (
    autotrade_get_account_summary,
    autotrade_get_orders,
    autotrade_get_performance,
    autotrade_get_positions,
)

__version__ = "1.0.0"

__all__ = [
    "AutotradeClient",
    "AutotradeTransportError",
    "NormalizedResponse",
    "PerformancePeriod",
    "autotrade_get_positions",
    "autotrade_get_account_summary",
    "autotrade_get_performance",
    "autotrade_get_orders",
]
