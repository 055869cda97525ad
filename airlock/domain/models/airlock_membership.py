"""Airlock membership - the devices discovered for one airlock."""

from __future__ import annotations

from dataclasses import dataclass, field

from airlock.domain.ports.cycle_indicator import CycleIndicatorPort
from airlock.domain.ports.door import DoorPort
from airlock.domain.ports.vent import VentPort


@dataclass(frozen=True)
class AirlockMembership:
    """Device handles supplied by discovery for a named airlock.

    Membership is a plain snapshot: it is not validated here. The Airlock
    that binds it enforces the non-emptiness rule.

    Attributes:
        interior_doors: Doors facing the pressurized side.
        exterior_doors: Doors facing the vacuum side.
        vents: Vents controlling the room pressure.
        indicator: Optional status indicator for the cycle.
    """

    interior_doors: tuple[DoorPort, ...] = field(default_factory=tuple)
    exterior_doors: tuple[DoorPort, ...] = field(default_factory=tuple)
    vents: tuple[VentPort, ...] = field(default_factory=tuple)
    indicator: CycleIndicatorPort | None = None

    def __post_init__(self) -> None:
        """Convert lists to tuples for immutability."""
        for name in ("interior_doors", "exterior_doors", "vents"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    def missing_groups(self) -> list[str]:
        """Return the names of required device groups that are empty."""
        missing = []
        if not self.interior_doors:
            missing.append("interior_doors")
        if not self.exterior_doors:
            missing.append("exterior_doors")
        if not self.vents:
            missing.append("vents")
        return missing

    def is_valid(self) -> bool:
        """True if every required device group has at least one member."""
        return not self.missing_groups()
