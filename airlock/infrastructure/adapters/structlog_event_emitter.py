"""Structlog event emitter - renders lifecycle events as log entries.

This is the default notification collaborator: every event becomes one
structured log line named after its event type.
"""

from __future__ import annotations

from airlock.domain.events.airlock import (
    AIRLOCK_REJECTED_EVENT_TYPE,
    AIRLOCK_TICK_FAILED_EVENT_TYPE,
    AirlockEvent,
)
from airlock.infrastructure.observability.logging import get_logger_for_service

# Events that indicate a problem an operator should look at
_WARNING_EVENT_TYPES = frozenset(
    {AIRLOCK_REJECTED_EVENT_TYPE, AIRLOCK_TICK_FAILED_EVENT_TYPE}
)


class StructlogAirlockEventEmitter:
    """AirlockEventEmitterPort implementation writing to structlog."""

    def __init__(self, component: str = "notifications") -> None:
        self._log = get_logger_for_service(self.__class__.__name__, component=component)

    def emit(self, event: AirlockEvent) -> None:
        fields = event.to_dict()
        event_type = fields.pop("event_type")
        if event_type in _WARNING_EVENT_TYPES:
            self._log.warning(event_type, **fields)
        else:
            self._log.info(event_type, **fields)
