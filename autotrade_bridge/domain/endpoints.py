"""Upstream endpoints and how each one is normalized."""

from dataclasses import dataclass
from typing import Any

from .enums import DataShape
from .normalizer import is_success_status, normalize
from .response import NormalizedResponse

UNKNOWN_ERROR = "Unknown error"


@dataclass(frozen=True)
class Endpoint:
    """One GET endpoint of the Autotrade Integration Service.

    ``fallback_error=None`` means failures report ``HTTP <code>`` instead
    of the upstream ``error`` field.
    """

    path: str
    shape: DataShape
    failure_prefix: str
    fallback_error: str | None = UNKNOWN_ERROR

    def normalize(self, status_code: int, body: Any) -> NormalizedResponse[Any]:
        return normalize(
            is_success_status(status_code),
            body,
            shape=self.shape,
            failure_prefix=self.failure_prefix,
            fallback_error=self.fallback_error,
            status_code=status_code,
        )


POSITIONS = Endpoint(
    path="/api/v1/positions",
    shape=DataShape.SEQUENCE,
    failure_prefix="Failed to fetch positions",
)

PORTFOLIO = Endpoint(
    path="/api/v1/portfolio",
    shape=DataShape.VALUE,
    failure_prefix="Failed to fetch portfolio",
)

PERFORMANCE = Endpoint(
    path="/api/v1/portfolio/performance",
    shape=DataShape.WHOLE_BODY,
    failure_prefix="Failed to fetch performance",
    fallback_error=None,
)

# Orders pass ``data`` through as-is, like the portfolio summary
ORDERS = Endpoint(
    path="/api/v1/orders",
    shape=DataShape.VALUE,
    failure_prefix="Failed to fetch orders",
)
