"""
Structured logging utilities for Word Frontend Service using Structlog.

Key Features:
- Async-safe correlation ID context via contextvars
- Environment-based output formatting (console for development, JSON for production)
- Service context fields aligned with OpenTelemetry naming
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.typing import Processor


def add_service_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """
    Add service context to all logs.

    Fields added:
    - service.name: Logical service name (from SERVICE_NAME env var)
    - deployment.environment: Environment (development/staging/production)
    """
    event_dict["service.name"] = os.getenv("SERVICE_NAME", "unknown")
    event_dict["deployment.environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def configure_service_logging(
    service_name: str,
    environment: str | None = None,
    log_level: str = "INFO",
) -> None:
    """
    Configure structlog for the service.

    Args:
        service_name: Name of the service (e.g., "word-frontend-service")
        environment: Environment name (defaults to ENVIRONMENT env var)
        log_level: Logging level (defaults to "INFO")

    Environment Variables:
        LOG_FORMAT: "json" for JSON, "console" for human-readable (default: console,
            or json in production)
    """
    if environment is None:
        environment = os.getenv("ENVIRONMENT", "development")

    os.environ.setdefault("SERVICE_NAME", service_name)
    os.environ.setdefault("ENVIRONMENT", environment)

    log_format = os.getenv("LOG_FORMAT", "").lower()
    use_json = log_format == "json" or (not log_format and environment == "production")

    shared: list[Processor] = [
        merge_contextvars,
        add_service_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]

    if use_json:
        processors: list[Processor] = [
            *shared,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared,
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()),
        ]

    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_service_logger(name: str | None = None) -> Any:
    """
    Create a service logger with optional name binding.

    Args:
        name: Optional logger name (e.g., "app", "proxy_routes")

    Returns:
        A lazily configured structlog logger, so module-level loggers pick up
        configure_service_logging() even when created before it runs
    """
    if name:
        return structlog.get_logger(logger_name=name)

    return structlog.get_logger()


def bind_correlation_id(correlation_id: str) -> None:
    """Bind the request correlation ID to every log line of the current context."""
    clear_contextvars()
    bind_contextvars(correlation_id=correlation_id)


def clear_correlation_context() -> None:
    clear_contextvars()
