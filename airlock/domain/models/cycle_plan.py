"""Cycle plans - the typed operation set a cycle state machine drives.

A plan binds one airlock's doors and vents to a cycle direction. The state
machine only ever talks to a plan, so the direction-specific behavior
(which pressure target to reach, which doors to release) lives here as one
concrete class per direction.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from airlock.domain.models.door_group import DoorGroup
from airlock.domain.models.pressure_controller import PressureController
from airlock.domain.value_objects.cycle_direction import CycleDirection


class CyclePlan(ABC):
    """Operations a cycle needs, bound to one airlock and one direction.

    Shared behavior (closing, locking, polling all doors) is implemented
    here; subclasses decide the pressure target and the released doors.
    """

    direction: CycleDirection

    def __init__(
        self,
        interior: DoorGroup,
        exterior: DoorGroup,
        pressure: PressureController,
    ) -> None:
        """Bind the plan to an airlock's devices.

        Args:
            interior: Doors facing the pressurized side.
            exterior: Doors facing the vacuum side.
            pressure: The room's pressure controller.
        """
        self._interior = interior
        self._exterior = exterior
        self._all_doors = interior + exterior
        self._pressure = pressure

    @classmethod
    def for_direction(
        cls,
        direction: CycleDirection,
        interior: DoorGroup,
        exterior: DoorGroup,
        pressure: PressureController,
    ) -> CyclePlan:
        """Build the concrete plan for a direction.

        Args:
            direction: EGRESS or INGRESS.
            interior: Interior doors.
            exterior: Exterior doors.
            pressure: Pressure controller.

        Returns:
            EgressCyclePlan or IngressCyclePlan.
        """
        plan_class = _PLANS_BY_DIRECTION[direction]
        return plan_class(interior, exterior, pressure)

    @property
    def all_doors(self) -> DoorGroup:
        """Every door of the airlock, interior first."""
        return self._all_doors

    @property
    @abstractmethod
    def released_doors(self) -> DoorGroup:
        """Doors unlocked and opened once the room reaches its target."""

    def close_doors(self) -> None:
        self._all_doors.close()

    def lock_doors(self) -> None:
        self._all_doors.set_locked(True)

    def are_doors_closed(self) -> bool:
        return self._all_doors.all_closed

    def unlock_doors(self) -> None:
        self.released_doors.set_locked(False)

    def open_doors(self) -> None:
        self.released_doors.open()

    def drive_pressure(self) -> None:
        """Drive the vents toward this plan's pressure target."""
        self._pressure.drive(self.direction.pressure_direction)

    @abstractmethod
    def is_room_ready(self) -> bool:
        """True once the room has reached this plan's pressure target."""


class EgressCyclePlan(CyclePlan):
    """Pressurize the room, then release the interior doors."""

    direction = CycleDirection.EGRESS

    @property
    def released_doors(self) -> DoorGroup:
        return self._interior

    def is_room_ready(self) -> bool:
        return self._pressure.is_pressurized


class IngressCyclePlan(CyclePlan):
    """Depressurize the room, then release the exterior doors."""

    direction = CycleDirection.INGRESS

    @property
    def released_doors(self) -> DoorGroup:
        return self._exterior

    def is_room_ready(self) -> bool:
        return self._pressure.is_depressurized


_PLANS_BY_DIRECTION: dict[CycleDirection, type[CyclePlan]] = {
    CycleDirection.EGRESS: EgressCyclePlan,
    CycleDirection.INGRESS: IngressCyclePlan,
}
