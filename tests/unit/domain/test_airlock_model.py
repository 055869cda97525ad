"""Unit tests for the Airlock instance.

Tests:
- Construction rejects incomplete memberships
- Direction selection from room airtightness
- request_cycle idempotence while a cycle runs
- advance_tick lifecycle: IDLE, CYCLING, COMPLETE, back to IDLE
- reinitialize while idle, while busy and with an invalid membership
"""

from __future__ import annotations

import pytest

from airlock.domain.errors import AirlockBusyError, InvalidAirlockError
from airlock.domain.models import Airlock, AirlockMembership, AirlockStatus, CycleState
from airlock.domain.value_objects import CycleDirection, VentStatus
from airlock.infrastructure.stubs import DoorStub, VentStub


def _run_to_completion(airlock: Airlock, max_ticks: int = 20) -> list[AirlockStatus]:
    statuses = []
    for _ in range(max_ticks):
        status = airlock.advance_tick()
        statuses.append(status)
        if status is AirlockStatus.COMPLETE:
            break
    return statuses


class TestAirlockConstruction:
    """Test membership validation on construction."""

    def test_valid_membership_binds_groups(self, membership: AirlockMembership) -> None:
        airlock = Airlock("A", membership)

        assert airlock.name == "A"
        assert len(airlock.interior) == 1
        assert len(airlock.exterior) == 1
        assert len(airlock.pressure) == 1
        assert airlock.status is AirlockStatus.IDLE
        assert not airlock.is_cycling
        assert airlock.direction is None
        assert airlock.cycle_state is None
        assert airlock.released_doors is None

    @pytest.mark.parametrize(
        ("missing_field", "group_name"),
        [
            ("interior_doors", "interior_doors"),
            ("exterior_doors", "exterior_doors"),
            ("vents", "vents"),
        ],
    )
    def test_missing_group_is_rejected(
        self, missing_field: str, group_name: str
    ) -> None:
        fields = {
            "interior_doors": (DoorStub(),),
            "exterior_doors": (DoorStub(),),
            "vents": (VentStub(),),
        }
        fields[missing_field] = ()

        with pytest.raises(InvalidAirlockError) as exc_info:
            Airlock("A", AirlockMembership(**fields))

        assert exc_info.value.airlock_name == "A"
        assert exc_info.value.missing == (group_name,)

    def test_empty_membership_reports_every_missing_group(self) -> None:
        with pytest.raises(InvalidAirlockError) as exc_info:
            Airlock("A", AirlockMembership())

        assert exc_info.value.missing == ("interior_doors", "exterior_doors", "vents")


class TestDirectionSelection:
    """Test the airtightness direction heuristic."""

    def test_airtight_room_selects_egress(self, membership: AirlockMembership) -> None:
        airlock = Airlock("A", membership)

        assert airlock.select_direction() is CycleDirection.EGRESS

    def test_leaking_room_selects_ingress(
        self, membership: AirlockMembership, vent: VentStub
    ) -> None:
        vent.set_airtight(False)
        airlock = Airlock("A", membership)

        assert airlock.select_direction() is CycleDirection.INGRESS

    def test_direction_fixed_at_request_time(
        self, membership: AirlockMembership, vent: VentStub
    ) -> None:
        """Airtightness changes after the request do not change the cycle."""
        airlock = Airlock("A", membership)
        airlock.request_cycle()

        vent.set_airtight(False)
        airlock.advance_tick()

        assert airlock.direction is CycleDirection.EGRESS


class TestRequestCycle:
    """Test starting a cycle."""

    def test_request_starts_cycle_and_advances_once(
        self, membership: AirlockMembership, interior_door: DoorStub
    ) -> None:
        airlock = Airlock("A", membership)

        status = airlock.request_cycle()

        assert status is AirlockStatus.CYCLING
        assert airlock.is_cycling
        assert airlock.cycle_state is CycleState.DOORS_CLOSING
        assert interior_door.commands == ["close"]

    def test_request_while_cycling_is_no_op(
        self, membership: AirlockMembership, interior_door: DoorStub
    ) -> None:
        airlock = Airlock("A", membership)
        airlock.request_cycle()
        airlock.advance_tick()
        state = airlock.cycle_state

        status = airlock.request_cycle()

        assert status is AirlockStatus.CYCLING
        assert airlock.cycle_state is state
        assert interior_door.commands == ["close"]

    def test_released_doors_follow_direction(
        self, membership: AirlockMembership, vent: VentStub
    ) -> None:
        vent.set_airtight(False)
        airlock = Airlock("A", membership)

        airlock.request_cycle()

        assert airlock.released_doors is not None
        assert airlock.released_doors.doors == airlock.exterior.doors


class TestAdvanceTick:
    """Test the per-tick lifecycle."""

    def test_idle_airlock_reports_idle(self, membership: AirlockMembership) -> None:
        airlock = Airlock("A", membership)

        assert airlock.advance_tick() is AirlockStatus.IDLE

    def test_egress_cycle_completes_after_six_ticks(
        self, membership: AirlockMembership, interior_door: DoorStub
    ) -> None:
        """The request performs the first step; six ticks finish the cycle."""
        airlock = Airlock("A", membership)
        airlock.request_cycle()

        statuses = _run_to_completion(airlock)

        assert statuses == [AirlockStatus.CYCLING] * 5 + [AirlockStatus.COMPLETE]
        assert not airlock.is_cycling
        assert not interior_door.is_closed()
        assert not interior_door.locked

    def test_doors_locked_while_room_transfers(self, membership: AirlockMembership) -> None:
        airlock = Airlock("A", membership)
        airlock.request_cycle()
        assert not airlock.doors_locked

        locked = []
        for _ in range(6):
            airlock.advance_tick()
            locked.append(airlock.doors_locked)

        assert locked == [False, True, True, True, False, False]

    def test_tick_after_complete_reports_idle(
        self, membership: AirlockMembership
    ) -> None:
        airlock = Airlock("A", membership)
        airlock.request_cycle()
        _run_to_completion(airlock)

        assert airlock.advance_tick() is AirlockStatus.IDLE

    def test_new_cycle_allowed_after_completion(
        self, membership: AirlockMembership
    ) -> None:
        airlock = Airlock("A", membership)
        airlock.request_cycle()
        _run_to_completion(airlock)

        assert airlock.request_cycle() is AirlockStatus.CYCLING
        assert airlock.cycle_state is CycleState.DOORS_CLOSING

    def test_ingress_cycle_waits_for_vacuum(
        self, membership: AirlockMembership, vent: VentStub, exterior_door: DoorStub
    ) -> None:
        vent.set_airtight(False)
        airlock = Airlock("A", membership)
        airlock.request_cycle()

        for _ in range(10):
            assert airlock.advance_tick() is AirlockStatus.CYCLING
        assert airlock.cycle_state is CycleState.CYCLING

        vent.set_status(VentStatus.DEPRESSURIZED, oxygen=0.0)
        statuses = _run_to_completion(airlock)

        assert statuses[-1] is AirlockStatus.COMPLETE
        assert not exterior_door.is_closed()


class TestReinitialize:
    """Test rebinding an airlock to new devices."""

    def test_reinitialize_while_idle_rebinds(
        self, membership: AirlockMembership
    ) -> None:
        airlock = Airlock("A", membership)
        new_membership = AirlockMembership(
            interior_doors=(DoorStub("i1"), DoorStub("i2")),
            exterior_doors=(DoorStub("e1"),),
            vents=(VentStub("v1"),),
        )

        airlock.reinitialize(new_membership)

        assert len(airlock.interior) == 2

    def test_reinitialize_while_cycling_raises_busy(
        self, membership: AirlockMembership
    ) -> None:
        airlock = Airlock("A", membership)
        airlock.request_cycle()

        with pytest.raises(AirlockBusyError):
            airlock.reinitialize(membership)

        assert airlock.is_cycling
        assert airlock.cycle_state is CycleState.DOORS_CLOSING

    def test_reinitialize_with_invalid_membership_keeps_bindings(
        self, membership: AirlockMembership, interior_door: DoorStub
    ) -> None:
        airlock = Airlock("A", membership)

        with pytest.raises(InvalidAirlockError):
            airlock.reinitialize(AirlockMembership(vents=(VentStub(),)))

        assert airlock.interior.doors == (interior_door,)
