"""Cycle timer stub - records arming for tests and drives the simulation.

The registry never reads timer state; tests and the simulation loop do,
through ``is_armed`` and the recorded call counts.
"""

from __future__ import annotations

from airlock.config.airlock_config import (
    DEFAULT_TIMER_DELAY_SECONDS,
    DEFAULT_TIMER_NAME,
)


class CycleTimerStub:
    """In-memory implementation of CycleTimerPort.

    Attributes:
        name: Timer device name.
        delay_seconds: Configured delay between ticks.
        arm_count: Number of arm() calls.
        disarm_count: Number of disarm() calls.
    """

    def __init__(
        self,
        delay_seconds: int = DEFAULT_TIMER_DELAY_SECONDS,
        name: str = DEFAULT_TIMER_NAME,
    ) -> None:
        self.name = name
        self.delay_seconds = delay_seconds
        self.arm_count = 0
        self.disarm_count = 0
        self._armed = False

    @property
    def is_armed(self) -> bool:
        return self._armed

    def configure(self, delay_seconds: int) -> None:
        self.delay_seconds = delay_seconds

    def arm(self) -> None:
        self.arm_count += 1
        self._armed = True

    def disarm(self) -> None:
        self.disarm_count += 1
        self._armed = False

    def reset(self) -> None:
        """Reset counters and state for test isolation."""
        self.arm_count = 0
        self.disarm_count = 0
        self._armed = False
