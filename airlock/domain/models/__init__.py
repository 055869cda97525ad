"""Domain models for the airlock controller."""

from airlock.domain.models.airlock import Airlock, AirlockStatus
from airlock.domain.models.airlock_membership import AirlockMembership
from airlock.domain.models.cycle_plan import CyclePlan, EgressCyclePlan, IngressCyclePlan
from airlock.domain.models.cycle_state_machine import (
    LOCKED_STATES,
    NEXT_STATE,
    CycleState,
    CycleStateMachine,
    CycleStatus,
)
from airlock.domain.models.door_group import DoorGroup
from airlock.domain.models.pressure_controller import PressureController

__all__: list[str] = [
    "Airlock",
    "AirlockMembership",
    "AirlockStatus",
    "CyclePlan",
    "CycleState",
    "CycleStateMachine",
    "CycleStatus",
    "DoorGroup",
    "EgressCyclePlan",
    "IngressCyclePlan",
    "LOCKED_STATES",
    "NEXT_STATE",
    "PressureController",
]
