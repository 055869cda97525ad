"""structlog setup for the airlock controller.

``production`` renders one JSON object per line::

    {"event": "cycle_requested", "level": "info", "timestamp": "...",
     "service": "AirlockRegistryService", "component": "registry",
     "operation": "dispatch_cycle", "correlation_id": "cycle-9b1d...",
     "airlock_name": "Hangar", "direction": "egress"}

Any other environment gets the colored console renderer, which formats
exceptions itself. The level comes from ``LOG_LEVEL`` (default INFO).
"""

import logging
import os

import structlog
from structlog.typing import Processor

from airlock.application.observability.correlation import correlation_id_processor

LOG_LEVEL_ENV = "LOG_LEVEL"
PRODUCTION_ENVIRONMENT = "production"


def _get_log_level() -> int:
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def configure_structlog(environment: str) -> None:
    """Configure structlog once at startup.

    Args:
        environment: ``AirlockConfig.environment``; ``"production"`` selects
            JSON output.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        correlation_id_processor,
    ]
    if environment == PRODUCTION_ENVIRONMENT:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(service_name: str, component: str) -> structlog.BoundLogger:
    """Logger bound with ``service`` and ``component`` for adapters and scripts."""
    return structlog.get_logger().bind(service=service_name, component=component)
