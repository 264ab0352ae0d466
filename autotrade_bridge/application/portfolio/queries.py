"""Portfolio queries - one per upstream endpoint."""

from dataclasses import dataclass

from autotrade_bridge.application.shared import Query
from autotrade_bridge.domain.enums import PerformancePeriod


@dataclass(frozen=True)
class GetPositionsQuery(Query):
    """Positions for an account.

    Example:
        >>> GetPositionsQuery(account_id="DU8489265")
    """

    account_id: str
    """Autotrade account ID (e.g. "DU8489265")."""


@dataclass(frozen=True)
class GetAccountSummaryQuery(Query):
    """Portfolio snapshot for an account."""

    account_id: str


@dataclass(frozen=True)
class GetPerformanceQuery(Query):
    """Performance series for an account.

    Example:
        >>> GetPerformanceQuery(account_id="DU8489265", period=PerformancePeriod.THIRTY_DAYS)
    """

    account_id: str
    period: PerformancePeriod | str | None = None
    """Time period: "1d", "7d", "30d", "ytd", "1y", "all". None = service default."""

    @property
    def period_value(self) -> str | None:
        """Period as sent on the query string."""
        if isinstance(self.period, PerformancePeriod):
            return self.period.value
        return self.period


@dataclass(frozen=True)
class GetOrdersQuery(Query):
    """Current orders for an account."""

    account_id: str
