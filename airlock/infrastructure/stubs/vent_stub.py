"""Vent stub - in-memory vent for testing and simulation.

By default a vent only records drive commands; tests move it between
statuses explicitly. With ``settle_on_drive=True`` it jumps straight to the
settled state of the commanded direction, which is what the simulation
script uses.
"""

from __future__ import annotations

from airlock.domain.value_objects.pressure import PressureDirection, VentStatus

_SETTLED_STATUS: dict[PressureDirection, VentStatus] = {
    PressureDirection.PRESSURIZE: VentStatus.PRESSURIZED,
    PressureDirection.DEPRESSURIZE: VentStatus.DEPRESSURIZED,
}

_SETTLED_OXYGEN: dict[PressureDirection, float] = {
    PressureDirection.PRESSURIZE: 1.0,
    PressureDirection.DEPRESSURIZE: 0.0,
}


class VentStub:
    """In-memory implementation of VentPort.

    Attributes:
        name: Device name used by discovery.
        drives: Every direction the vent was driven in, in order.
    """

    def __init__(
        self,
        name: str = "Air Vent",
        status: VentStatus = VentStatus.PRESSURIZED,
        oxygen: float = 1.0,
        airtight: bool = True,
        settle_on_drive: bool = False,
    ) -> None:
        self.name = name
        self._status = status
        self._oxygen = oxygen
        self._airtight = airtight
        self._settle_on_drive = settle_on_drive
        self.drives: list[PressureDirection] = []

    def status(self) -> VentStatus:
        return self._status

    def oxygen_fraction(self) -> float:
        return self._oxygen

    def can_pressurize(self) -> bool:
        return self._airtight

    def drive(self, direction: PressureDirection) -> None:
        self.drives.append(direction)
        if self._settle_on_drive:
            self._status = _SETTLED_STATUS[direction]
            self._oxygen = _SETTLED_OXYGEN[direction]

    # Test helpers

    def set_status(self, status: VentStatus, oxygen: float | None = None) -> None:
        """Force the reported status (and optionally the oxygen fraction)."""
        self._status = status
        if oxygen is not None:
            self._oxygen = oxygen

    def set_airtight(self, airtight: bool) -> None:
        """Set whether the vent detects a sealed room."""
        self._airtight = airtight

    @property
    def last_drive(self) -> PressureDirection | None:
        return self.drives[-1] if self.drives else None
