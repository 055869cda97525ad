"""Application-level observability utilities."""

from airlock.application.observability.correlation import (
    TRIGGER_KINDS,
    begin_trigger,
    correlation_id_processor,
    get_correlation_id,
    set_correlation_id,
)

__all__ = [
    "TRIGGER_KINDS",
    "begin_trigger",
    "correlation_id_processor",
    "get_correlation_id",
    "set_correlation_id",
]
