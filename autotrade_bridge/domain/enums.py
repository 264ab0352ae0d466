"""Enums for the Autotrade bridge."""

from enum import Enum


class DataShape(str, Enum):
    """How ``data`` is extracted from a successful upstream body."""

    SEQUENCE = "sequence"
    """``body["data"]`` must be a JSON array, anything else becomes absent."""

    VALUE = "value"
    """``body["data"]`` is passed through unchanged, including null."""

    WHOLE_BODY = "whole_body"
    """The entire upstream body is the data."""


class PerformancePeriod(str, Enum):
    """Periods accepted by ``/api/v1/portfolio/performance``."""

    ONE_DAY = "1d"
    SEVEN_DAYS = "7d"
    THIRTY_DAYS = "30d"
    YEAR_TO_DATE = "ytd"
    ONE_YEAR = "1y"
    ALL = "all"
