"""Infrastructure adapters implementing airlock ports."""

from airlock.infrastructure.adapters.light_indicator import LightIndicator, LightPort
from airlock.infrastructure.adapters.structlog_event_emitter import (
    StructlogAirlockEventEmitter,
)

__all__: list[str] = [
    "LightIndicator",
    "LightPort",
    "StructlogAirlockEventEmitter",
]
