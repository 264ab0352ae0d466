"""Bridge Configuration.

Usage:
    from autotrade_bridge.config import get_settings, setup_logging, get_logger
    settings = get_settings()
    setup_logging()  # Call once at startup
    logger = get_logger(__name__)
"""

from .constants import AUTOTRADE_API_BASE, HTTP_TIMEOUT_SECS
from .settings import Settings, get_settings
from .logging import setup_logging, get_logger, call_context

__all__ = [
    "AUTOTRADE_API_BASE",
    "HTTP_TIMEOUT_SECS",
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "call_context",
]
