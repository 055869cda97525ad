"""Value objects for the airlock domain."""

from airlock.domain.value_objects.cycle_direction import CycleDirection
from airlock.domain.value_objects.pressure import (
    DEPRESSURIZED_OXYGEN_TOLERANCE,
    PressureDirection,
    VentStatus,
)

__all__: list[str] = [
    "CycleDirection",
    "DEPRESSURIZED_OXYGEN_TOLERANCE",
    "PressureDirection",
    "VentStatus",
]
