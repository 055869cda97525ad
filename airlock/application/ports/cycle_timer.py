"""Cycle timer port - the single shared re-trigger resource.

While at least one airlock is cycling, the timer re-invokes the registry's
``tick_all`` at its configured delay. The registry arms and disarms it and
never polls its state.
"""

from __future__ import annotations

from typing import Protocol


class CycleTimerPort(Protocol):
    """Protocol for the periodic re-trigger timer."""

    def configure(self, delay_seconds: int) -> None:
        """Set the delay between re-triggers.

        Args:
            delay_seconds: Seconds between ticks.
        """
        ...

    def arm(self) -> None:
        """Start periodic re-triggering."""
        ...

    def disarm(self) -> None:
        """Stop periodic re-triggering."""
        ...
