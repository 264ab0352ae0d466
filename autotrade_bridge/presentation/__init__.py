"""Presentation layer: the commands a UI calls."""

from .commands import (
    autotrade_get_account_summary,
    autotrade_get_orders,
    autotrade_get_performance,
    autotrade_get_positions,
)

__all__ = [
    "autotrade_get_positions",
    "autotrade_get_account_summary",
    "autotrade_get_performance",
    "autotrade_get_orders",
]
