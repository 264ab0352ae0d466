"""NormalizedResponse - the uniform envelope returned to callers."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .clock import now_ms

T = TypeVar("T")


class NormalizedResponse(BaseModel, Generic[T]):
    """Uniform ``{success, data, error, timestamp}`` envelope.

    Exactly one of ``data``/``error`` is set, except when the upstream
    call succeeded without an extractable ``data`` (both are None then).

    Example:
        >>> response = NormalizedResponse.ok([{"symbol": "AAPL", "quantity": 10}])
        >>> response.success
        True
        >>> NormalizedResponse.fail("Failed to fetch orders: Unknown error").data is None
        True
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    data: T | None = None
    error: str | None = None
    timestamp: int = Field(default_factory=now_ms, description="Epoch milliseconds")

    @model_validator(mode="after")
    def check_envelope(self) -> "NormalizedResponse[T]":
        """Enforce the data/error exclusivity rules."""
        if self.success and self.error is not None:
            raise ValueError("successful response cannot carry an error")
        if not self.success:
            if self.data is not None:
                raise ValueError("failed response cannot carry data")
            if self.error is None:
                raise ValueError("failed response requires an error message")
        return self

    @classmethod
    def ok(cls, data: Any = None) -> "NormalizedResponse[T]":
        """Build a successful envelope stamped with the current time."""
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "NormalizedResponse[T]":
        """Build a failed envelope stamped with the current time."""
        return cls(success=False, error=error)
