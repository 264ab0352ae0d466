"""Base Handler class for Queries."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .query import Query

TQuery = TypeVar("TQuery", bound=Query)
TResult = TypeVar("TResult")


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """Base class for query handlers.

    A handler owns one use case: fetch from its collaborator, shape the
    result, return it. No side effects.

    Example:
        >>> class GetOrdersHandler(QueryHandler[GetOrdersQuery, NormalizedResponse]):
        ...     def __init__(self, client: AutotradeClient):
        ...         self.client = client
        ...
        ...     async def handle(self, query: GetOrdersQuery) -> NormalizedResponse:
        ...         status, body = await self.client.get_json("/api/v1/orders")
        ...         return ORDERS.normalize(status, body)
    """

    @abstractmethod
    async def handle(self, query: TQuery) -> TResult:
        """Handle query and return result.

        Args:
            query: Query to handle.

        Returns:
            Query result.
        """
        pass
