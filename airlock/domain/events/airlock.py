"""Airlock lifecycle event payloads.

The core emits these discrete, named events; rendering and persistence
belong to whichever emitter adapter receives them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from airlock.domain.models.cycle_state_machine import CycleState
from airlock.domain.value_objects.cycle_direction import CycleDirection

AIRLOCK_REGISTERED_EVENT_TYPE: str = "airlock.registered"
AIRLOCK_REJECTED_EVENT_TYPE: str = "airlock.rejected"
CYCLE_REQUESTED_EVENT_TYPE: str = "airlock.cycle_requested"
CYCLE_REQUEST_IGNORED_EVENT_TYPE: str = "airlock.cycle_request_ignored"
CYCLE_STATE_ENTERED_EVENT_TYPE: str = "airlock.cycle_state_entered"
CYCLE_COMPLETED_EVENT_TYPE: str = "airlock.cycle_completed"
AIRLOCK_TICK_FAILED_EVENT_TYPE: str = "airlock.tick_failed"


@dataclass(frozen=True)
class AirlockEvent:
    """Base payload for every airlock lifecycle event.

    Attributes:
        airlock_name: Airlock the event concerns.
    """

    event_type: ClassVar[str] = ""

    airlock_name: str

    def to_dict(self) -> dict[str, Any]:
        """Convert payload to a flat dict for logging or transport."""
        return {"event_type": self.event_type, "airlock_name": self.airlock_name}


@dataclass(frozen=True)
class AirlockRegisteredEvent(AirlockEvent):
    """An airlock was built or rebuilt from discovered devices."""

    event_type: ClassVar[str] = AIRLOCK_REGISTERED_EVENT_TYPE

    interior_doors: int
    exterior_doors: int
    vents: int

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "interior_doors": self.interior_doors,
            "exterior_doors": self.exterior_doors,
            "vents": self.vents,
        }


@dataclass(frozen=True)
class AirlockRejectedEvent(AirlockEvent):
    """An airlock failed the membership check and was not registered."""

    event_type: ClassVar[str] = AIRLOCK_REJECTED_EVENT_TYPE

    missing: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "missing": list(self.missing)}


@dataclass(frozen=True)
class CycleRequestedEvent(AirlockEvent):
    """A new cycle was started."""

    event_type: ClassVar[str] = CYCLE_REQUESTED_EVENT_TYPE

    direction: CycleDirection

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "direction": self.direction.value}


@dataclass(frozen=True)
class CycleRequestIgnoredEvent(AirlockEvent):
    """A cycle was requested while one was already running."""

    event_type: ClassVar[str] = CYCLE_REQUEST_IGNORED_EVENT_TYPE

    current_state: CycleState

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "current_state": self.current_state.value}


@dataclass(frozen=True)
class CycleStateEnteredEvent(AirlockEvent):
    """The airlock's cycle moved into a new state."""

    event_type: ClassVar[str] = CYCLE_STATE_ENTERED_EVENT_TYPE

    direction: CycleDirection
    state: CycleState

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "direction": self.direction.value,
            "state": self.state.value,
        }


@dataclass(frozen=True)
class CycleCompletedEvent(AirlockEvent):
    """The airlock's cycle finished and released its target doors."""

    event_type: ClassVar[str] = CYCLE_COMPLETED_EVENT_TYPE

    direction: CycleDirection

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "direction": self.direction.value}


@dataclass(frozen=True)
class AirlockTickFailedEvent(AirlockEvent):
    """A device adapter raised while the airlock was being advanced.

    The cycle keeps its state and is retried on the next tick.
    """

    event_type: ClassVar[str] = AIRLOCK_TICK_FAILED_EVENT_TYPE

    error: str

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "error": self.error}
