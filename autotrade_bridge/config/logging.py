"""Structured Logging Configuration.

- JSON format for production (easy parsing by log aggregators)
- Human-readable format for development
- Per-call context (command name, account id)
- Credential header redaction

Until ``setup_logging()`` runs, a minimal INFO-level console config
writes to stderr, so importing the bridge never prints to stdout.

Usage:
    from autotrade_bridge.config.logging import setup_logging, get_logger

    setup_logging()  # Call once at startup
    logger = get_logger(__name__)
    logger.info("positions.started", account_id="DU8489265")
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from structlog.typing import EventDict

from .constants import SERVICE_NAME, SERVICE_VERSION
from .settings import get_settings


# ============================================================================
# SENSITIVE DATA FILTER
# ============================================================================


# HTTP credential fields; the bridge itself sends none, but an upstream
# error payload or request headers may end up in a log event.
SENSITIVE_KEYS = frozenset({
    "authorization",
    "cookie",
    "set-cookie",
    "token",
})


def _redact(value: Any) -> Any:
    if not isinstance(value, dict):
        return value
    return {
        key: "[REDACTED]" if key.lower() in SENSITIVE_KEYS else _redact(item)
        for key, item in value.items()
    }


def filter_sensitive_data(
    logger: logging.Logger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Replace values of sensitive keys, at any depth, with '[REDACTED]'."""
    return _redact(event_dict)


# ============================================================================
# CUSTOM PROCESSORS
# ============================================================================


def add_service_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add service context to log events."""
    event_dict["service"] = SERVICE_NAME
    event_dict["environment"] = get_settings().environment
    event_dict["version"] = SERVICE_VERSION
    return event_dict


# ============================================================================
# LOGGING SETUP
# ============================================================================


def setup_logging() -> None:
    """Configure structured logging for the bridge.

    Call this once at startup, before the first command runs.

    Configuration based on settings.log_format:
    - console: colored, human-readable output
    - json: one JSON object per line
    """
    settings = get_settings()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        add_service_context,
        filter_sensitive_data,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: structlog.types.Processor
    if settings.log_format == "json":
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    # Both structlog and stdlib records are rendered once, by the handler
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Diagnostics go to stderr so stdout stays free for the caller
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(getattr(logging, settings.log_level))

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Resolved per logger so a redirected sys.stderr is honoured
    return structlog.PrintLogger(sys.stderr)


def configure_default_logging() -> None:
    """Minimal INFO-level console logging to stderr.

    Applied at import so commands called without ``setup_logging()``
    never write to stdout. An existing structlog configuration is left
    alone.
    """
    if structlog.is_configured():
        return

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            filter_sensitive_data,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        logger_factory=_stderr_logger,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Usage:
        logger = get_logger(__name__)
        logger.info("orders.completed", success=True)
    """
    return structlog.get_logger(name)


# ============================================================================
# CALL CONTEXT
# ============================================================================


@contextmanager
def call_context(command: str, account_id: str, **extra: Any) -> Iterator[None]:
    """Bind command context to all log calls made inside the block.

    Context vars are task-local, so concurrent commands don't see each
    other's bindings.
    """
    with structlog.contextvars.bound_contextvars(
        command=command,
        account_id=account_id,
        **extra,
    ):
        yield


configure_default_logging()
