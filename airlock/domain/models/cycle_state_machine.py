"""Cycle state machine - sequencing engine for one airlock cycle.

The machine is driven from outside: every call to ``advance()`` runs at
most one state's entry action and then either waits on a condition or
moves to the next state. It never blocks or sleeps, so feeding it ticks
and asserting the state after each is the whole test story.

State sequence (strictly linear, never backwards):

    INIT -> DOORS_CLOSING -> DOORS_CLOSED -> DOORS_LOCKED -> CYCLING
         -> CYCLED -> DOORS_UNLOCKED -> FINISHED

Doors are locked before the pressure transfer starts and are unlocked only
after the plan confirms the room is ready. No state has a timeout: a door
that never closes or a vent that never settles keeps the machine waiting,
re-evaluated on every tick, until someone intervenes.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

import structlog

from airlock.domain.models.cycle_plan import CyclePlan
from airlock.domain.ports.cycle_indicator import CycleIndicatorPort, NullCycleIndicator
from airlock.domain.value_objects.cycle_direction import CycleDirection

log = structlog.get_logger()


class CycleState(Enum):
    """State of an airlock cycle."""

    INIT = "init"
    DOORS_CLOSING = "doors_closing"
    DOORS_CLOSED = "doors_closed"
    DOORS_LOCKED = "doors_locked"
    CYCLING = "cycling"
    CYCLED = "cycled"
    DOORS_UNLOCKED = "doors_unlocked"
    FINISHED = "finished"


class CycleStatus(Enum):
    """Result of a single advance."""

    RUNNING = "running"
    COMPLETE = "complete"


# The only transitions a machine may ever take
NEXT_STATE: dict[CycleState, CycleState] = {
    CycleState.INIT: CycleState.DOORS_CLOSING,
    CycleState.DOORS_CLOSING: CycleState.DOORS_CLOSED,
    CycleState.DOORS_CLOSED: CycleState.DOORS_LOCKED,
    CycleState.DOORS_LOCKED: CycleState.CYCLING,
    CycleState.CYCLING: CycleState.CYCLED,
    CycleState.CYCLED: CycleState.DOORS_UNLOCKED,
    CycleState.DOORS_UNLOCKED: CycleState.FINISHED,
}

# States in which every door is commanded locked
LOCKED_STATES: frozenset[CycleState] = frozenset(
    {CycleState.DOORS_LOCKED, CycleState.CYCLING, CycleState.CYCLED}
)


class CycleStateMachine:
    """Drives one airlock through a single cycle.

    The machine references (but does not own) the plan's doors and vents.
    An indicator is optional; without one a NullCycleIndicator is used so
    sequencing never checks for it.

    Example:
        >>> machine = CycleStateMachine(EgressCyclePlan(interior, exterior, vents))
        >>> machine.advance()
        <CycleStatus.RUNNING: 'running'>
        >>> machine.state
        <CycleState.DOORS_CLOSING: 'doors_closing'>
    """

    def __init__(
        self,
        plan: CyclePlan,
        indicator: CycleIndicatorPort | None = None,
        airlock_name: str = "",
    ) -> None:
        """Initialize the machine in INIT.

        Args:
            plan: Direction-specific operations to drive.
            indicator: Optional status indicator.
            airlock_name: Owning airlock, used for log context only.
        """
        self._plan = plan
        self._indicator: CycleIndicatorPort = (
            indicator if indicator is not None else NullCycleIndicator()
        )
        self._state = CycleState.INIT
        self._log = log.bind(airlock=airlock_name, direction=plan.direction.value)
        self._steps: dict[CycleState, Callable[[], bool]] = {
            CycleState.INIT: self._start,
            CycleState.DOORS_CLOSING: self._plan.are_doors_closed,
            CycleState.DOORS_CLOSED: self._lock,
            CycleState.DOORS_LOCKED: self._cycle,
            CycleState.CYCLING: self._plan.is_room_ready,
            CycleState.CYCLED: self._unlock,
            CycleState.DOORS_UNLOCKED: self._release,
        }

    @property
    def state(self) -> CycleState:
        """Current state."""
        return self._state

    @property
    def direction(self) -> CycleDirection:
        """Direction this machine is bound to."""
        return self._plan.direction

    @property
    def plan(self) -> CyclePlan:
        """Plan this machine drives."""
        return self._plan

    @property
    def doors_locked(self) -> bool:
        """True while every door is commanded locked."""
        return self._state in LOCKED_STATES

    @property
    def is_finished(self) -> bool:
        """True once the machine has reached FINISHED."""
        return self._state is CycleState.FINISHED

    def advance(self) -> CycleStatus:
        """Run one step of the cycle.

        Performs the current state's entry action (or checks its wait
        condition) and moves to the next state when the step allows it.

        Returns:
            COMPLETE on the transition into FINISHED (and on any call
            after it), RUNNING otherwise.
        """
        if self.is_finished:
            return CycleStatus.COMPLETE

        if self._steps[self._state]():
            self._enter(NEXT_STATE[self._state])

        return CycleStatus.COMPLETE if self.is_finished else CycleStatus.RUNNING

    def _enter(self, new_state: CycleState) -> None:
        self._log.debug(
            "cycle_state_entered",
            from_state=self._state.value,
            to_state=new_state.value,
        )
        self._state = new_state

    def _start(self) -> bool:
        self._plan.close_doors()
        self._indicator.start_cycle()
        return True

    def _lock(self) -> bool:
        self._plan.lock_doors()
        self._indicator.show_locked()
        return True

    def _cycle(self) -> bool:
        self._plan.drive_pressure()
        return True

    def _unlock(self) -> bool:
        self._plan.unlock_doors()
        self._indicator.show_open(self._plan.direction)
        self._indicator.stop_cycle()
        return True

    def _release(self) -> bool:
        self._plan.open_doors()
        return True
