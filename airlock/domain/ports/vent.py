"""Vent port - contract for a single pressure-control device."""

from __future__ import annotations

from typing import Protocol

from airlock.domain.value_objects.pressure import PressureDirection, VentStatus


class VentPort(Protocol):
    """Protocol for a vent that pressurizes or depressurizes a room.

    All queries are non-blocking reads of externally-mutated state;
    ``drive`` is a fire-and-forget command.
    """

    def status(self) -> VentStatus:
        """Return the vent's current status."""
        ...

    def oxygen_fraction(self) -> float:
        """Return the room oxygen level reported by the vent, in [0, 1]."""
        ...

    def can_pressurize(self) -> bool:
        """Return True if the vent detects no opening in the room boundary."""
        ...

    def drive(self, direction: PressureDirection) -> None:
        """Command the vent to pressurize or depressurize the room.

        Args:
            direction: Target pressure direction.
        """
        ...
