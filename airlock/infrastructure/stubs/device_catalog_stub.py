"""Device catalog stub - name-based airlock discovery over in-memory devices.

Devices are registered by name; ``discover`` collects every device whose
name contains the airlock's search tag (the airlock name wrapped with the
configured tag wrapper) and sorts them into roles:

- doors named with "exterior" (any case) are exterior doors, other doors
  are interior doors
- vents are vents
- lights named with "interior", "exterior" or "cycle" feed the matching
  bank of a LightIndicator; other lights are ignored

Usage:
    catalog = DeviceCatalogStub(AirlockConfig(tag_wrapper=("[", "]")))
    catalog.add_door(DoorStub("[A] Interior Door"))
    catalog.add_door(DoorStub("[A] Exterior Door"))
    catalog.add_vent(VentStub("[A] Vent"))
    membership = catalog.discover("A")
"""

from __future__ import annotations

import structlog

from airlock.config.airlock_config import DEFAULT_AIRLOCK_CONFIG, AirlockConfig
from airlock.domain.models.airlock_membership import AirlockMembership
from airlock.infrastructure.adapters.light_indicator import LightIndicator
from airlock.infrastructure.stubs.door_stub import DoorStub
from airlock.infrastructure.stubs.light_stub import LightStub
from airlock.infrastructure.stubs.vent_stub import VentStub

log = structlog.get_logger(__name__)


class DeviceCatalogStub:
    """In-memory implementation of AirlockDiscoveryPort."""

    def __init__(self, config: AirlockConfig = DEFAULT_AIRLOCK_CONFIG) -> None:
        self._config = config
        self._doors: list[DoorStub] = []
        self._vents: list[VentStub] = []
        self._lights: list[LightStub] = []

    def add_door(self, door: DoorStub) -> DoorStub:
        self._doors.append(door)
        return door

    def add_vent(self, vent: VentStub) -> VentStub:
        self._vents.append(vent)
        return vent

    def add_light(self, light: LightStub) -> LightStub:
        self._lights.append(light)
        return light

    def remove(self, name: str) -> None:
        """Remove every device with exactly this name (simulates teardown)."""
        self._doors = [d for d in self._doors if d.name != name]
        self._vents = [v for v in self._vents if v.name != name]
        self._lights = [light for light in self._lights if light.name != name]

    def discover(self, airlock_name: str) -> AirlockMembership:
        tag = self._config.wrap_tag(airlock_name)

        interior: list[DoorStub] = []
        exterior: list[DoorStub] = []
        for door in self._doors:
            if tag not in door.name:
                continue
            if "exterior" in door.name.lower():
                exterior.append(door)
            else:
                interior.append(door)

        vents = [vent for vent in self._vents if tag in vent.name]

        banks: dict[str, list[LightStub]] = {"interior": [], "exterior": [], "cycle": []}
        for light in self._lights:
            if tag not in light.name:
                continue
            lowered = light.name.lower()
            for role, bank in banks.items():
                if role in lowered:
                    bank.append(light)
                    break

        indicator = LightIndicator(
            cycle_lights=banks["cycle"],
            interior_lights=banks["interior"],
            exterior_lights=banks["exterior"],
        )

        log.debug(
            "airlock_devices_discovered",
            airlock=airlock_name,
            tag=tag,
            interior_doors=len(interior),
            exterior_doors=len(exterior),
            vents=len(vents),
        )
        return AirlockMembership(
            interior_doors=tuple(interior),
            exterior_doors=tuple(exterior),
            vents=tuple(vents),
            indicator=indicator if indicator.has_lights else None,
        )
