"""Response Normalizer.

Pure functions that turn ``(status, upstream JSON body)`` into a
``NormalizedResponse``. No I/O here: the transport call that acquires the
body lives in ``infrastructure.http``.

Upstream bodies look like ``{"success": bool, "data": ..., "error": str?}``.
Only one envelope layer is unwrapped; ``data`` itself is never inspected.
"""

from typing import Any

from .enums import DataShape
from .response import NormalizedResponse


def is_success_status(status_code: int) -> bool:
    """True for 2xx status codes."""
    return 200 <= status_code < 300


def extract_data(body: Any, shape: DataShape) -> Any:
    """Extract the success payload from an upstream body.

    Args:
        body: Parsed upstream JSON (any JSON value).
        shape: How to extract, see ``DataShape``.

    Returns:
        The payload, or None when absent or of the wrong shape.
    """
    if shape is DataShape.WHOLE_BODY:
        return body

    if not isinstance(body, dict):
        return None

    data = body.get("data")
    if shape is DataShape.SEQUENCE and not isinstance(data, list):
        return None
    return data


def extract_error(body: Any, fallback: str) -> str:
    """Return the upstream ``error`` string, or ``fallback`` if there isn't one."""
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, str):
            return error
    return fallback


def normalize(
    status_ok: bool,
    body: Any,
    *,
    shape: DataShape,
    failure_prefix: str,
    fallback_error: str | None = None,
    status_code: int | None = None,
) -> NormalizedResponse[Any]:
    """Normalize one upstream response.

    Args:
        status_ok: Whether the upstream HTTP status was in the success range.
        body: Parsed upstream JSON body.
        shape: Extraction rule for ``data`` on success.
        failure_prefix: Message prefix on failure, e.g. "Failed to fetch orders".
        fallback_error: Used when the body has no ``error`` string. When None,
            the message is ``HTTP <status_code>`` and the body's ``error`` is
            not consulted.
        status_code: Upstream status, required when ``fallback_error`` is None.

    Returns:
        NormalizedResponse with ``timestamp`` set to now.

    Raises:
        ValueError: If neither ``fallback_error`` nor ``status_code`` is given.

    Example:
        >>> normalize(
        ...     False, {"error": "account not found"},
        ...     shape=DataShape.SEQUENCE,
        ...     failure_prefix="Failed to fetch positions",
        ...     fallback_error="Unknown error",
        ... ).error
        'Failed to fetch positions: account not found'
    """
    if status_ok:
        return NormalizedResponse.ok(extract_data(body, shape))

    if fallback_error is not None:
        message = extract_error(body, fallback_error)
    elif status_code is not None:
        message = f"HTTP {status_code}"
    else:
        raise ValueError("status_code is required when fallback_error is None")

    return NormalizedResponse.fail(f"{failure_prefix}: {message}")
