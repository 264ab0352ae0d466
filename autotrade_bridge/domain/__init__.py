"""Domain layer: the normalized envelope and the rules that build it."""

from .clock import now_ms
from .endpoints import ORDERS, PERFORMANCE, PORTFOLIO, POSITIONS, UNKNOWN_ERROR, Endpoint
from .enums import DataShape, PerformancePeriod
from .exceptions import (
    AutotradeParseError,
    AutotradeRequestError,
    AutotradeTransportError,
    BridgeError,
)
from .normalizer import extract_data, extract_error, is_success_status, normalize
from .response import NormalizedResponse

__all__ = [
    "NormalizedResponse",
    "DataShape",
    "PerformancePeriod",
    "Endpoint",
    "POSITIONS",
    "PORTFOLIO",
    "PERFORMANCE",
    "ORDERS",
    "UNKNOWN_ERROR",
    "normalize",
    "extract_data",
    "extract_error",
    "is_success_status",
    "now_ms",
    "BridgeError",
    "AutotradeTransportError",
    "AutotradeRequestError",
    "AutotradeParseError",
]
