"""Airlock membership and dispatch errors.

These errors are always local to one airlock or one request. None of them
is fatal to the process: the registry logs them, reports them as events
and keeps every other airlock running.
"""

from __future__ import annotations

from collections.abc import Sequence

from airlock.domain.exceptions import AirlockError


class InvalidAirlockError(AirlockError):
    """Raised when an airlock's device membership is incomplete.

    An airlock needs at least one interior door, one exterior door and one
    vent. Anything less is rejected at construction or reinitialization and
    is never registered.

    Attributes:
        airlock_name: Name of the rejected airlock.
        missing: Device groups that were found empty.
    """

    def __init__(self, airlock_name: str, missing: Sequence[str]) -> None:
        """Initialize invalid airlock error.

        Args:
            airlock_name: Name of the rejected airlock.
            missing: Device groups that were found empty
                (e.g. ``("exterior_doors",)``).
        """
        self.airlock_name = airlock_name
        self.missing = tuple(missing)
        super().__init__(
            f"Invalid airlock '{airlock_name}': "
            f"no devices found for {', '.join(self.missing)}"
        )


class UnknownAirlockError(AirlockError):
    """Raised when a cycle is dispatched to a name the registry does not hold.

    Attributes:
        airlock_name: The name that was not found.
    """

    def __init__(self, airlock_name: str) -> None:
        self.airlock_name = airlock_name
        super().__init__(f"Unknown airlock: {airlock_name}")


class AirlockBusyError(AirlockError):
    """Raised when an airlock cannot be rebound because it is mid-cycle.

    Door and vent bindings stay unchanged until the cycle finishes.

    Attributes:
        airlock_name: Name of the busy airlock.
    """

    def __init__(self, airlock_name: str) -> None:
        self.airlock_name = airlock_name
        super().__init__(
            f"Airlock '{airlock_name}' is cycling and cannot be reinitialized"
        )
