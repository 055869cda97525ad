"""Application services for the airlock controller."""

from airlock.application.services.airlock_registry_service import (
    AirlockRegistryService,
)

__all__: list[str] = ["AirlockRegistryService"]
