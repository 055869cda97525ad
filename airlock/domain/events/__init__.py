"""Domain events for the airlock controller."""

from airlock.domain.events.airlock import (
    AIRLOCK_REGISTERED_EVENT_TYPE,
    AIRLOCK_REJECTED_EVENT_TYPE,
    AIRLOCK_TICK_FAILED_EVENT_TYPE,
    CYCLE_COMPLETED_EVENT_TYPE,
    CYCLE_REQUEST_IGNORED_EVENT_TYPE,
    CYCLE_REQUESTED_EVENT_TYPE,
    CYCLE_STATE_ENTERED_EVENT_TYPE,
    AirlockEvent,
    AirlockRegisteredEvent,
    AirlockRejectedEvent,
    AirlockTickFailedEvent,
    CycleCompletedEvent,
    CycleRequestedEvent,
    CycleRequestIgnoredEvent,
    CycleStateEnteredEvent,
)

__all__: list[str] = [
    "AIRLOCK_REGISTERED_EVENT_TYPE",
    "AIRLOCK_REJECTED_EVENT_TYPE",
    "AIRLOCK_TICK_FAILED_EVENT_TYPE",
    "CYCLE_COMPLETED_EVENT_TYPE",
    "CYCLE_REQUESTED_EVENT_TYPE",
    "CYCLE_REQUEST_IGNORED_EVENT_TYPE",
    "CYCLE_STATE_ENTERED_EVENT_TYPE",
    "AirlockEvent",
    "AirlockRegisteredEvent",
    "AirlockRejectedEvent",
    "AirlockTickFailedEvent",
    "CycleCompletedEvent",
    "CycleRequestIgnoredEvent",
    "CycleRequestedEvent",
    "CycleStateEnteredEvent",
]
