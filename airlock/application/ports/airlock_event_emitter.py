"""Airlock event emitter port - the notification collaborator.

Receives every lifecycle event the core produces. Adapters may render,
display or forward them; the core neither formats nor persists text.
"""

from __future__ import annotations

from typing import Protocol

from airlock.domain.events.airlock import AirlockEvent


class AirlockEventEmitterPort(Protocol):
    """Protocol for publishing airlock lifecycle events."""

    def emit(self, event: AirlockEvent) -> None:
        """Publish a lifecycle event.

        Args:
            event: The event to publish.
        """
        ...
