"""Airlock event emitter stub - collects emitted events for verification."""

from __future__ import annotations

from airlock.domain.events.airlock import AirlockEvent


class AirlockEventEmitterStub:
    """In-memory implementation of AirlockEventEmitterPort.

    Example:
        >>> emitter = AirlockEventEmitterStub()
        >>> registry = AirlockRegistryService(discovery, timer, emitter)
        >>> registry.dispatch_cycle("A")
        >>> emitter.event_types()
        ['airlock.cycle_requested', 'airlock.cycle_state_entered']
    """

    def __init__(self) -> None:
        self.events: list[AirlockEvent] = []

    def emit(self, event: AirlockEvent) -> None:
        self.events.append(event)

    def event_types(self) -> list[str]:
        """Return the type of every emitted event, in order."""
        return [event.event_type for event in self.events]

    def of_type(self, event_type: str) -> list[AirlockEvent]:
        """Return emitted events of one type, in order."""
        return [event for event in self.events if event.event_type == event_type]

    def clear(self) -> None:
        """Forget emitted events."""
        self.events.clear()
