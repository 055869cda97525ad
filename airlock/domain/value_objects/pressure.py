"""Pressure value objects shared by vents and the pressure controller."""

from __future__ import annotations

from enum import Enum

# Vents can latch in DEPRESSURIZING after the room is already near-vacuum.
# Below this oxygen fraction the room counts as depressurized anyway.
DEPRESSURIZED_OXYGEN_TOLERANCE: float = 0.01


class VentStatus(Enum):
    """Status reported by a single vent.

    PRESSURIZED / DEPRESSURIZED are settled states;
    PRESSURIZING / DEPRESSURIZING are transitional.
    """

    PRESSURIZED = "pressurized"
    DEPRESSURIZED = "depressurized"
    PRESSURIZING = "pressurizing"
    DEPRESSURIZING = "depressurizing"


class PressureDirection(Enum):
    """Direction a vent is commanded to drive the room atmosphere."""

    PRESSURIZE = "pressurize"
    DEPRESSURIZE = "depressurize"
