"""Pressure controller - aggregate facade over the vents of one room."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from airlock.domain.ports.vent import VentPort
from airlock.domain.value_objects.pressure import (
    DEPRESSURIZED_OXYGEN_TOLERANCE,
    PressureDirection,
    VentStatus,
)


@dataclass(frozen=True)
class PressureController:
    """Ordered, immutable set of vents driven as one unit.

    The aggregate predicates treat any member that has not reached the
    target state (including unreachable ones) as "not ready".

    Attributes:
        name: Label for the controller.
        vents: Member vents in discovery order.
    """

    name: str
    vents: tuple[VentPort, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Convert lists to tuples for immutability."""
        if not isinstance(self.vents, tuple):
            object.__setattr__(self, "vents", tuple(self.vents))

    def __len__(self) -> int:
        return len(self.vents)

    def __iter__(self) -> Iterator[VentPort]:
        return iter(self.vents)

    @property
    def is_empty(self) -> bool:
        """True if the controller has no vents."""
        return not self.vents

    @property
    def is_pressurized(self) -> bool:
        """True iff every vent reports PRESSURIZED."""
        return all(vent.status() is VentStatus.PRESSURIZED for vent in self.vents)

    @property
    def is_depressurized(self) -> bool:
        """True iff every vent has reached (near) vacuum.

        A vent counts when it reports DEPRESSURIZED, or when it is stuck
        reporting DEPRESSURIZING with the oxygen fraction at or below
        DEPRESSURIZED_OXYGEN_TOLERANCE.
        """
        return all(_vent_is_depressurized(vent) for vent in self.vents)

    @property
    def can_pressurize(self) -> bool:
        """True iff every vent reports the room boundary airtight."""
        return all(vent.can_pressurize() for vent in self.vents)

    def drive(self, direction: PressureDirection) -> None:
        """Command every vent to drive in the given direction.

        Args:
            direction: PRESSURIZE or DEPRESSURIZE.
        """
        for vent in self.vents:
            vent.drive(direction)


def _vent_is_depressurized(vent: VentPort) -> bool:
    status = vent.status()
    if status is VentStatus.DEPRESSURIZED:
        return True
    if status is VentStatus.DEPRESSURIZING:
        return vent.oxygen_fraction() <= DEPRESSURIZED_OXYGEN_TOLERANCE
    return False
