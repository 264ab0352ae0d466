"""Shared Application Layer components."""

from .handler import QueryHandler
from .query import Query

__all__ = [
    "Query",
    "QueryHandler",
]
