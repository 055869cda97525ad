"""
Pytest configuration and shared fixtures for the airlock controller tests.

Testing Standards:
- Unit tests go in tests/unit/, mirroring the airlock package layers
- Integration tests go in tests/integration/
- Devices, timer and notifications are the in-memory stubs from
  airlock.infrastructure.stubs; no test touches real hardware or sleeps
"""

from __future__ import annotations

import pytest
import structlog

from airlock.application.observability import set_correlation_id
from airlock.application.services import AirlockRegistryService
from airlock.config import AirlockConfig
from airlock.domain.models import AirlockMembership
from airlock.infrastructure.stubs import (
    AirlockEventEmitterStub,
    CycleTimerStub,
    DeviceCatalogStub,
    DoorStub,
    VentStub,
)


@pytest.fixture(autouse=True)
def _reset_structlog() -> None:
    """Keep structlog configuration and trigger IDs from leaking between tests."""
    structlog.reset_defaults()
    set_correlation_id("")


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from airlock import __version__

    return __version__


@pytest.fixture
def interior_door() -> DoorStub:
    """An open interior door."""
    return DoorStub("Interior Door", closed=False)


@pytest.fixture
def exterior_door() -> DoorStub:
    """A closed exterior door."""
    return DoorStub("Exterior Door", closed=True)


@pytest.fixture
def vent() -> VentStub:
    """An airtight vent reporting pressurized."""
    return VentStub("Air Vent")


@pytest.fixture
def membership(
    interior_door: DoorStub, exterior_door: DoorStub, vent: VentStub
) -> AirlockMembership:
    """A complete single-door, single-vent airlock membership."""
    return AirlockMembership(
        interior_doors=(interior_door,),
        exterior_doors=(exterior_door,),
        vents=(vent,),
    )


@pytest.fixture
def tagged_config() -> AirlockConfig:
    """Configuration for airlocks A and B with bracketed device tags."""
    return AirlockConfig(airlock_names=("A", "B"), tag_wrapper=("[", "]"))


@pytest.fixture
def catalog(tagged_config: AirlockConfig) -> DeviceCatalogStub:
    """Device catalog with a complete airlock A and a complete airlock B."""
    catalog = DeviceCatalogStub(tagged_config)
    for name in ("A", "B"):
        catalog.add_door(DoorStub(f"[{name}] Interior Door", closed=False))
        catalog.add_door(DoorStub(f"[{name}] Exterior Door", closed=True))
        catalog.add_vent(VentStub(f"[{name}] Air Vent"))
    return catalog


@pytest.fixture
def timer() -> CycleTimerStub:
    """Shared cycle timer stub."""
    return CycleTimerStub()


@pytest.fixture
def emitter() -> AirlockEventEmitterStub:
    """Event emitter stub collecting lifecycle events."""
    return AirlockEventEmitterStub()


@pytest.fixture
def registry(
    catalog: DeviceCatalogStub,
    timer: CycleTimerStub,
    emitter: AirlockEventEmitterStub,
) -> AirlockRegistryService:
    """Empty registry wired to the catalog, timer and emitter stubs."""
    return AirlockRegistryService(discovery=catalog, timer=timer, emitter=emitter)


@pytest.fixture
def connected_registry(
    registry: AirlockRegistryService,
    tagged_config: AirlockConfig,
    emitter: AirlockEventEmitterStub,
) -> AirlockRegistryService:
    """Registry connected to airlocks A and B, with connect events cleared."""
    registry.connect(tagged_config)
    emitter.clear()
    return registry
