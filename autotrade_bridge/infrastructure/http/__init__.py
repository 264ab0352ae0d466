"""HTTP transport for the Autotrade Integration Service."""

from .client import AutotradeClient

__all__ = ["AutotradeClient"]
