"""Cycle direction value object."""

from __future__ import annotations

from enum import Enum

from airlock.domain.value_objects.pressure import PressureDirection


class CycleDirection(Enum):
    """Direction of an airlock cycle.

    EGRESS: pressurize the room, then release the interior doors.
    INGRESS: depressurize the room, then release the exterior doors.
    """

    INGRESS = "ingress"
    EGRESS = "egress"

    @property
    def pressure_direction(self) -> PressureDirection:
        """Pressure direction the vents are driven in for this cycle."""
        if self is CycleDirection.EGRESS:
            return PressureDirection.PRESSURIZE
        return PressureDirection.DEPRESSURIZE

    @property
    def released_side(self) -> str:
        """Name of the door side unlocked and opened at the end of the cycle."""
        return "interior" if self is CycleDirection.EGRESS else "exterior"
