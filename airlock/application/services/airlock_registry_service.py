"""Airlock registry and timer arbiter.

The registry owns every Airlock of an installation and the single shared
cycle timer. External triggers reach the airlocks only through it:

- ``dispatch_cycle(name)``: a cycle command for one airlock
- ``tick_all()``: a periodic re-invocation advancing every airlock
- ``connect(config)``: (re)build the airlocks from discovered devices

Arbiter invariant:
    The timer is armed iff the re-invocation set is non-empty, and a name
    is in the re-invocation set iff its airlock has an active cycle.

Error policy:
    Every failure stays local to one airlock or one request. Invalid
    airlocks are reported and skipped, unknown names are reported to the
    caller, and a device adapter raising during a tick leaves that airlock
    in place for the next tick while the others keep advancing. A discovery
    lookup that raises drops only that airlock from a rebuild, and an
    emitter that raises is logged without touching the timer bookkeeping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from airlock.application.services.base import LoggingMixin
from airlock.domain.errors.airlock import (
    AirlockBusyError,
    InvalidAirlockError,
    UnknownAirlockError,
)
from airlock.domain.events.airlock import (
    AirlockEvent,
    AirlockRegisteredEvent,
    AirlockRejectedEvent,
    AirlockTickFailedEvent,
    CycleCompletedEvent,
    CycleRequestedEvent,
    CycleRequestIgnoredEvent,
    CycleStateEnteredEvent,
)
from airlock.domain.models.airlock import Airlock, AirlockStatus
from airlock.domain.models.cycle_state_machine import CycleState

if TYPE_CHECKING:
    from airlock.application.ports.airlock_discovery import AirlockDiscoveryPort
    from airlock.application.ports.airlock_event_emitter import (
        AirlockEventEmitterPort,
    )
    from airlock.application.ports.cycle_timer import CycleTimerPort
    from airlock.config.airlock_config import AirlockConfig
    from airlock.domain.models.airlock_membership import AirlockMembership
    from airlock.domain.value_objects.cycle_direction import CycleDirection


class AirlockRegistryService(LoggingMixin):
    """Owns the named airlocks and arbitrates the shared cycle timer.

    Example:
        >>> registry = AirlockRegistryService(discovery, timer, emitter)
        >>> registry.connect(AirlockConfig(airlock_names=("A",)))
        ['A']
        >>> registry.dispatch_cycle("A")
        <AirlockStatus.CYCLING: 'cycling'>
        >>> timer.is_armed
        True
    """

    def __init__(
        self,
        discovery: AirlockDiscoveryPort,
        timer: CycleTimerPort,
        emitter: AirlockEventEmitterPort,
    ) -> None:
        """Initialize an empty registry.

        Args:
            discovery: Supplies device membership per airlock name.
            timer: Shared periodic re-trigger.
            emitter: Receives lifecycle events.
        """
        self._discovery = discovery
        self._timer = timer
        self._emitter = emitter
        self._airlocks: dict[str, Airlock] = {}
        self._reinvocation: set[str] = set()
        self._timer_armed = False
        self._init_logger(component="registry")

    @property
    def names(self) -> tuple[str, ...]:
        """Registered airlock names in registration order."""
        return tuple(self._airlocks)

    @property
    def cycling_names(self) -> frozenset[str]:
        """Names currently needing periodic re-invocation."""
        return frozenset(self._reinvocation)

    @property
    def is_timer_armed(self) -> bool:
        """Whether the registry has the shared timer armed."""
        return self._timer_armed

    def __contains__(self, name: object) -> bool:
        return name in self._airlocks

    def __len__(self) -> int:
        return len(self._airlocks)

    def get(self, name: str) -> Airlock:
        """Look up a registered airlock.

        Args:
            name: Airlock name.

        Returns:
            The registered Airlock.

        Raises:
            UnknownAirlockError: If no airlock has that name.
        """
        airlock = self._airlocks.get(name)
        if airlock is None:
            self._log_operation("get", airlock_name=name).warning("unknown_airlock")
            raise UnknownAirlockError(name)
        return airlock

    def register(self, name: str, membership: AirlockMembership) -> Airlock:
        """Add an airlock, or rebind an existing one to new devices.

        Args:
            name: Airlock name.
            membership: Devices discovered for it.

        Returns:
            The registered Airlock.

        Raises:
            InvalidAirlockError: If the membership is incomplete. A new
                airlock is not registered; an existing one keeps its
                previous devices.
            AirlockBusyError: If the existing airlock is mid-cycle.
        """
        log = self._log_operation("register", airlock_name=name)
        existing = self._airlocks.get(name)
        try:
            airlock = self._build(name, membership, existing)
        except AirlockBusyError:
            assert existing is not None
            log.warning("airlock_kept_while_cycling", doors_locked=existing.doors_locked)
            raise
        except InvalidAirlockError as exc:
            self._report_rejected(exc)
            raise
        self._airlocks[name] = airlock
        log.info("airlock_registered")
        return airlock

    def connect(self, config: AirlockConfig) -> list[str]:
        """Rebuild the registry from the configured airlock names.

        Idle airlocks are rebuilt from freshly discovered devices, airlocks
        failing the membership check or whose discovery raises are dropped
        and reported, and airlocks in the middle of a cycle are kept
        untouched (even if no longer configured) until their cycle completes.

        Args:
            config: Installation configuration.

        Returns:
            Names registered after the rebuild.
        """
        log = self._log_operation(
            "connect", airlock_names=list(config.airlock_names)
        )
        log.info("connect_started")
        self._timer.configure(config.timer_delay_seconds)

        rebuilt: dict[str, Airlock] = {}
        for name in config.airlock_names:
            existing = self._airlocks.get(name)
            try:
                membership = self._discovery.discover(name)
            except Exception:
                log.exception("airlock_discovery_failed", airlock_name=name)
                if existing is not None and existing.is_cycling:
                    rebuilt[name] = existing
                continue
            try:
                rebuilt[name] = self._build(name, membership, existing)
            except AirlockBusyError:
                assert existing is not None
                log.warning(
                    "airlock_kept_while_cycling",
                    airlock_name=name,
                    doors_locked=existing.doors_locked,
                )
                rebuilt[name] = existing
            except InvalidAirlockError as exc:
                self._report_rejected(exc)

        for name, airlock in self._airlocks.items():
            if name not in rebuilt and airlock.is_cycling:
                log.warning("unlisted_airlock_kept_while_cycling", airlock_name=name)
                rebuilt[name] = airlock

        self._airlocks = rebuilt
        log.info("connect_completed", registered=list(rebuilt))
        return list(rebuilt)

    def dispatch_cycle(self, name: str) -> AirlockStatus:
        """Request a cycle on one airlock.

        A request on an airlock that is already cycling is a no-op.

        Args:
            name: Airlock name.

        Returns:
            The airlock's status after the request (CYCLING).

        Raises:
            UnknownAirlockError: If no airlock has that name.
        """
        log = self._log_operation("dispatch_cycle", airlock_name=name)
        airlock = self.get(name)

        if airlock.is_cycling:
            assert airlock.cycle_state is not None
            log.info(
                "cycle_request_ignored",
                state=airlock.cycle_state.value,
                doors_locked=airlock.doors_locked,
            )
            self._emit(CycleRequestIgnoredEvent(name, airlock.cycle_state))
            return airlock.status

        try:
            status = airlock.request_cycle()
        finally:
            if airlock.is_cycling:
                self._claim_timer(name)

        direction = airlock.direction
        assert direction is not None
        log.info("cycle_requested", direction=direction.value)
        self._emit(CycleRequestedEvent(name, direction))
        self._report_progress(airlock, CycleState.INIT, direction, status)
        return status

    def tick_all(self) -> dict[str, AirlockStatus]:
        """Advance every registered airlock by one step.

        Returns:
            Status per airlock name for this tick.
        """
        log = self._log_operation("tick_all", cycling=sorted(self._reinvocation))
        results: dict[str, AirlockStatus] = {}

        for name, airlock in list(self._airlocks.items()):
            before = airlock.cycle_state
            direction = airlock.direction
            try:
                status = airlock.advance_tick()
            except Exception as exc:
                log.exception("airlock_tick_failed", airlock_name=name)
                self._emit(AirlockTickFailedEvent(name, repr(exc)))
                results[name] = airlock.status
                continue

            results[name] = status
            if status is AirlockStatus.COMPLETE:
                self._release_timer(name)
            if direction is not None and before is not None:
                self._report_progress(airlock, before, direction, status)

        return results

    def _build(
        self,
        name: str,
        membership: AirlockMembership,
        existing: Airlock | None,
    ) -> Airlock:
        if existing is None:
            airlock = Airlock(name, membership)
        else:
            existing.reinitialize(membership)
            airlock = existing
        self._emit(
            AirlockRegisteredEvent(
                name,
                interior_doors=len(airlock.interior),
                exterior_doors=len(airlock.exterior),
                vents=len(airlock.pressure),
            )
        )
        return airlock

    def _report_rejected(self, error: InvalidAirlockError) -> None:
        self._log_operation("reject", airlock_name=error.airlock_name).warning(
            "airlock_rejected", missing=list(error.missing)
        )
        self._emit(AirlockRejectedEvent(error.airlock_name, error.missing))

    def _report_progress(
        self,
        airlock: Airlock,
        before: CycleState,
        direction: CycleDirection,
        status: AirlockStatus,
    ) -> None:
        if status is AirlockStatus.COMPLETE:
            self._emit(CycleStateEnteredEvent(airlock.name, direction, CycleState.FINISHED))
            self._emit(CycleCompletedEvent(airlock.name, direction))
            return
        after = airlock.cycle_state
        if after is not None and after is not before:
            self._emit(CycleStateEnteredEvent(airlock.name, direction, after))

    def _claim_timer(self, name: str) -> None:
        self._reinvocation.add(name)
        if not self._timer_armed:
            self._timer.arm()
            self._timer_armed = True
            self._log_operation("arm_timer", airlock_name=name).debug("timer_armed")

    def _release_timer(self, name: str) -> None:
        self._reinvocation.discard(name)
        if not self._reinvocation and self._timer_armed:
            self._timer.disarm()
            self._timer_armed = False
            self._log_operation("disarm_timer", airlock_name=name).debug("timer_disarmed")

    def _emit(self, event: AirlockEvent) -> None:
        try:
            self._emitter.emit(event)
        except Exception:
            self._log_operation("emit", airlock_name=event.airlock_name).exception(
                "event_emit_failed", event_type=event.event_type
            )
