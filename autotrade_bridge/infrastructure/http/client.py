"""HTTP client for the Autotrade Integration Service.

One GET per call, no retries. Connection errors, timeouts and non-JSON
bodies raise ``AutotradeTransportError`` subclasses; every other outcome,
including 4xx/5xx statuses, is returned to the caller as
``(status_code, body)`` for normalization.
"""

import asyncio
from types import TracebackType
from typing import Any, Optional, Type

import httpx

from autotrade_bridge.config.constants import AUTOTRADE_API_BASE, HTTP_TIMEOUT_SECS
from autotrade_bridge.config.logging import get_logger
from autotrade_bridge.domain.exceptions import AutotradeParseError, AutotradeRequestError

logger = get_logger(__name__)


class AutotradeClient:
    """Async client over ``httpx.AsyncClient``.

    Safe to share between concurrent commands; nothing but the connection
    pool is shared.

    Example:
        >>> async with AutotradeClient() as client:
        ...     status, body = await client.get_json("/api/v1/positions")
    """

    def __init__(
        self,
        base_url: str = AUTOTRADE_API_BASE,
        timeout: float = HTTP_TIMEOUT_SECS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            base_url: Service base URL.
            timeout: Request deadline in seconds.
            transport: Optional transport override (e.g. httpx.MockTransport).
        """
        self.base_url = base_url
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "AutotradeClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def get_json(
        self,
        path: str,
        params: dict[str, str] | None = None,
    ) -> tuple[int, Any]:
        """GET ``path`` and parse the body as JSON.

        The body is parsed whatever the status code, so upstream error
        payloads reach the normalizer.

        Args:
            path: Endpoint path relative to base_url.
            params: Optional query string parameters.

        Returns:
            Tuple of (HTTP status code, parsed JSON body).

        Raises:
            AutotradeRequestError: Connection failure or timeout.
            AutotradeParseError: Body is not valid JSON.
        """
        try:
            # httpx timeouts are per phase; the deadline covers the whole request
            response = await asyncio.wait_for(
                self._client.get(path, params=params),
                self.timeout,
            )
        except asyncio.TimeoutError as e:
            reason = f"deadline of {self.timeout}s exceeded"
            logger.warning("autotrade.request_failed", path=path, error=reason)
            raise AutotradeRequestError(f"Request failed: {reason}", path=path) from e
        except httpx.HTTPError as e:
            # httpx timeouts may carry an empty message
            reason = str(e) or type(e).__name__
            logger.warning("autotrade.request_failed", path=path, error=reason)
            raise AutotradeRequestError(f"Request failed: {reason}", path=path) from e

        try:
            body = response.json()
        except ValueError as e:
            logger.warning(
                "autotrade.parse_failed",
                path=path,
                status_code=response.status_code,
                error=str(e),
            )
            raise AutotradeParseError(
                f"Failed to parse response: {e}",
                path=path,
                status_code=response.status_code,
            ) from e

        logger.debug("autotrade.response", path=path, status_code=response.status_code)
        return response.status_code, body
