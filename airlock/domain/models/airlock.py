"""Airlock instance - one room, its doors and vents, and its active cycle.

An Airlock owns at most one CycleStateMachine. The machine is created in
``request_cycle`` and dropped in ``advance_tick`` on the tick it reports
completion; nothing else creates or discards it.

Direction heuristic:
    If the room reports airtight (``can_pressurize``) when a cycle is
    requested, the controller assumes the exterior side is sealed and
    cycles toward the pressurized side (EGRESS). Otherwise the room is
    assumed open to vacuum and cycles toward it (INGRESS). The heuristic
    approximates occupant intent.
"""

from __future__ import annotations

from enum import Enum

import structlog

from airlock.domain.errors.airlock import AirlockBusyError, InvalidAirlockError
from airlock.domain.models.airlock_membership import AirlockMembership
from airlock.domain.models.cycle_plan import CyclePlan
from airlock.domain.models.cycle_state_machine import (
    CycleState,
    CycleStateMachine,
    CycleStatus,
)
from airlock.domain.models.door_group import DoorGroup
from airlock.domain.models.pressure_controller import PressureController
from airlock.domain.ports.cycle_indicator import CycleIndicatorPort
from airlock.domain.value_objects.cycle_direction import CycleDirection

log = structlog.get_logger()


class AirlockStatus(Enum):
    """Status reported upward to the registry."""

    IDLE = "idle"
    CYCLING = "cycling"
    COMPLETE = "complete"


class Airlock:
    """A named airlock with interior/exterior doors and a pressure controller.

    Attributes:
        name: Unique airlock name within a registry.

    Raises:
        InvalidAirlockError: On construction if the membership has no
            interior doors, no exterior doors or no vents.
    """

    def __init__(self, name: str, membership: AirlockMembership) -> None:
        """Bind the airlock to its devices.

        Args:
            name: Airlock name.
            membership: Devices discovered for this airlock.

        Raises:
            InvalidAirlockError: If a required device group is empty.
        """
        self.name = name
        self._machine: CycleStateMachine | None = None
        self._bind(membership)

    @property
    def interior(self) -> DoorGroup:
        return self._interior

    @property
    def exterior(self) -> DoorGroup:
        return self._exterior

    @property
    def pressure(self) -> PressureController:
        return self._pressure

    @property
    def is_cycling(self) -> bool:
        """True while a state machine is active."""
        return self._machine is not None

    @property
    def status(self) -> AirlockStatus:
        """IDLE or CYCLING, depending on whether a machine is active."""
        return AirlockStatus.CYCLING if self.is_cycling else AirlockStatus.IDLE

    @property
    def direction(self) -> CycleDirection | None:
        """Direction of the active cycle, or None when idle."""
        return self._machine.direction if self._machine is not None else None

    @property
    def cycle_state(self) -> CycleState | None:
        """State of the active cycle, or None when idle."""
        return self._machine.state if self._machine is not None else None

    @property
    def doors_locked(self) -> bool:
        """True while the active cycle holds every door locked."""
        return self._machine is not None and self._machine.doors_locked

    @property
    def released_doors(self) -> DoorGroup | None:
        """Doors the active cycle will unlock and open, or None when idle."""
        return self._machine.plan.released_doors if self._machine is not None else None

    def select_direction(self) -> CycleDirection:
        """Choose the cycle direction from the room's current airtightness.

        Returns:
            EGRESS if the room can pressurize, INGRESS otherwise.
        """
        if self._pressure.can_pressurize:
            return CycleDirection.EGRESS
        return CycleDirection.INGRESS

    def request_cycle(self) -> AirlockStatus:
        """Start a cycle, or do nothing if one is already running.

        A new machine is built for the selected direction and advanced
        once immediately, so the doors start closing on the request itself.

        Returns:
            CYCLING (for both a new and an already-running cycle).
        """
        if self._machine is not None:
            return AirlockStatus.CYCLING

        direction = self.select_direction()
        plan = CyclePlan.for_direction(
            direction, self._interior, self._exterior, self._pressure
        )
        self._machine = CycleStateMachine(
            plan, indicator=self._indicator, airlock_name=self.name
        )
        log.info("cycle_started", airlock=self.name, direction=direction.value)
        return self._advance()

    def advance_tick(self) -> AirlockStatus:
        """Advance the active cycle by one step.

        Returns:
            IDLE if no cycle is active, COMPLETE on the tick the cycle
            finishes (the machine is dropped, so the next call returns
            IDLE), CYCLING otherwise.
        """
        if self._machine is None:
            return AirlockStatus.IDLE
        return self._advance()

    def reinitialize(self, membership: AirlockMembership) -> None:
        """Replace the airlock's device bindings.

        Args:
            membership: Freshly discovered devices.

        Raises:
            AirlockBusyError: If a cycle is active. Bindings are unchanged.
            InvalidAirlockError: If the new membership is incomplete.
                Bindings are unchanged.
        """
        if self._machine is not None:
            log.warning("reinitialize_rejected_busy", airlock=self.name)
            raise AirlockBusyError(self.name)
        self._bind(membership)
        log.info("airlock_reinitialized", airlock=self.name)

    def _advance(self) -> AirlockStatus:
        assert self._machine is not None
        if self._machine.advance() is CycleStatus.COMPLETE:
            log.info(
                "cycle_finished",
                airlock=self.name,
                direction=self._machine.direction.value,
            )
            self._machine = None
            return AirlockStatus.COMPLETE
        return AirlockStatus.CYCLING

    def _bind(self, membership: AirlockMembership) -> None:
        if not membership.is_valid():
            missing = membership.missing_groups()
            log.warning("airlock_invalid", airlock=self.name, missing=missing)
            raise InvalidAirlockError(self.name, missing)

        self._interior = DoorGroup("interior", membership.interior_doors)
        self._exterior = DoorGroup("exterior", membership.exterior_doors)
        self._pressure = PressureController("vents", membership.vents)
        self._indicator: CycleIndicatorPort | None = membership.indicator
