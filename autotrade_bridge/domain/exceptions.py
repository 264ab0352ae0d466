"""Bridge exceptions.

Only transport/parse failures are exceptions. Failures reported by the
upstream service are returned as ``NormalizedResponse(success=False)``.
"""

from typing import Any


class BridgeError(Exception):
    """Base exception for all bridge errors.

    Example:
        >>> raise BridgeError("Request failed", path="/api/v1/orders")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """Initialize bridge exception.

        Args:
            message: Human-readable error message.
            **context: Additional context (path, status_code, etc).
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class AutotradeTransportError(BridgeError):
    """Terminal failure: no normalized envelope can be produced."""

    pass


class AutotradeRequestError(AutotradeTransportError):
    """Raised when the request could not be sent or timed out."""

    pass


class AutotradeParseError(AutotradeTransportError):
    """Raised when the upstream body is not valid JSON."""

    pass
