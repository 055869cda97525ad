"""
Device ports (interfaces) for the airlock domain.

Ports define the device contracts that infrastructure adapters implement,
keeping the cycle logic pure and testable without physical hardware.
"""

from airlock.domain.ports.cycle_indicator import CycleIndicatorPort, NullCycleIndicator
from airlock.domain.ports.door import DoorPort
from airlock.domain.ports.vent import VentPort

__all__: list[str] = [
    "CycleIndicatorPort",
    "DoorPort",
    "NullCycleIndicator",
    "VentPort",
]
