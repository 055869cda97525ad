"""Domain errors for the airlock controller.

All exceptions inherit from AirlockError.
"""

from airlock.domain.errors.airlock import (
    AirlockBusyError,
    InvalidAirlockError,
    UnknownAirlockError,
)

__all__: list[str] = [
    "AirlockBusyError",
    "InvalidAirlockError",
    "UnknownAirlockError",
]
