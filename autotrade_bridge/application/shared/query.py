"""Base Query class.

Query - a read-only request for data. Every bridge command is a query:
none of them change state upstream.
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class Query(ABC):
    """Base class for all queries.

    Query characteristics:
    - **Read-only**: no side effects beyond the upstream GET
    - **Immutable**: frozen=True
    - **Noun-based naming**: GetPositions, GetOrders

    Example:
        >>> @dataclass(frozen=True)
        ... class GetOrdersQuery(Query):
        ...     account_id: str

        >>> query = GetOrdersQuery(account_id="DU8489265")
        >>> response = await handler.handle(query)
    """

    pass
