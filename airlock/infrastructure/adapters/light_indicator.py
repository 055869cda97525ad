"""Light indicator adapter - shows cycle progress on light banks.

Three optional banks are driven:
- cycle lights: on while atmosphere is being transferred
- interior lights / exterior lights: red while the doors are locked,
  green on the side released at the end of the cycle
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from airlock.domain.value_objects.cycle_direction import CycleDirection

LOCKED_COLOR = "red"
OPEN_COLOR = "green"


class LightPort(Protocol):
    """Protocol for a controllable light."""

    def turn_on(self) -> None: ...

    def turn_off(self) -> None: ...

    def set_color(self, color: str) -> None: ...


class LightIndicator:
    """CycleIndicatorPort implementation over banks of lights."""

    def __init__(
        self,
        cycle_lights: Sequence[LightPort] = (),
        interior_lights: Sequence[LightPort] = (),
        exterior_lights: Sequence[LightPort] = (),
    ) -> None:
        self._cycle_lights = tuple(cycle_lights)
        # door side -> lights showing whether that side may be entered
        self._side_lights: dict[str, tuple[LightPort, ...]] = {
            "interior": tuple(interior_lights),
            "exterior": tuple(exterior_lights),
        }

    @property
    def has_lights(self) -> bool:
        """True if any bank has at least one light."""
        return bool(self._cycle_lights) or any(self._side_lights.values())

    def start_cycle(self) -> None:
        for light in self._cycle_lights:
            light.turn_on()

    def show_locked(self) -> None:
        for lights in self._side_lights.values():
            for light in lights:
                light.set_color(LOCKED_COLOR)

    def show_open(self, direction: CycleDirection) -> None:
        for light in self._side_lights[direction.released_side]:
            light.set_color(OPEN_COLOR)

    def stop_cycle(self) -> None:
        for light in self._cycle_lights:
            light.turn_off()
