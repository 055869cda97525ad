"""Application ports for the airlock controller.

Collaborator contracts used by the registry service: device discovery,
the shared cycle timer and lifecycle event emission.
"""

from airlock.application.ports.airlock_discovery import AirlockDiscoveryPort
from airlock.application.ports.airlock_event_emitter import AirlockEventEmitterPort
from airlock.application.ports.cycle_timer import CycleTimerPort

__all__: list[str] = [
    "AirlockDiscoveryPort",
    "AirlockEventEmitterPort",
    "CycleTimerPort",
]
