"""Cycle indicator port - optional visual status output for a cycle.

Indicators never influence sequencing. An airlock without one cycles
exactly the same way.
"""

from __future__ import annotations

from typing import Protocol

from airlock.domain.value_objects.cycle_direction import CycleDirection


class CycleIndicatorPort(Protocol):
    """Protocol for cycle status indicators (typically lights)."""

    def start_cycle(self) -> None:
        """Signal that a cycle has started."""
        ...

    def show_locked(self) -> None:
        """Signal that every door is locked."""
        ...

    def show_open(self, direction: CycleDirection) -> None:
        """Signal that the released side of the airlock may be used.

        Args:
            direction: Direction of the finished cycle, which determines
                the side being released.
        """
        ...

    def stop_cycle(self) -> None:
        """Signal that the pressure transfer has finished."""
        ...


class NullCycleIndicator:
    """Indicator used when an airlock has no indicator devices."""

    def start_cycle(self) -> None:
        pass

    def show_locked(self) -> None:
        pass

    def show_open(self, direction: CycleDirection) -> None:
        pass

    def stop_cycle(self) -> None:
        pass
