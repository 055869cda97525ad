"""Observability infrastructure: structlog configuration.

Usage:
    from airlock.infrastructure.observability import configure_structlog

    configure_structlog(environment=config.environment)
    log = get_logger_for_service("AirlockSimulation", component="simulation")
"""

from airlock.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = [
    "configure_structlog",
    "get_logger_for_service",
]
