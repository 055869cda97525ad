"""In-memory stub implementations of airlock ports.

Used by the test suite and by the simulation script in place of real
devices, timers and notification channels.
"""

from airlock.infrastructure.stubs.airlock_event_emitter_stub import (
    AirlockEventEmitterStub,
)
from airlock.infrastructure.stubs.cycle_timer_stub import CycleTimerStub
from airlock.infrastructure.stubs.device_catalog_stub import DeviceCatalogStub
from airlock.infrastructure.stubs.door_stub import DoorStub
from airlock.infrastructure.stubs.light_stub import LightStub
from airlock.infrastructure.stubs.vent_stub import VentStub

__all__: list[str] = [
    "AirlockEventEmitterStub",
    "CycleTimerStub",
    "DeviceCatalogStub",
    "DoorStub",
    "LightStub",
    "VentStub",
]
