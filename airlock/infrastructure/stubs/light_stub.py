"""Light stub - in-memory light for indicator testing and simulation."""

from __future__ import annotations


class LightStub:
    """In-memory implementation of the LightPort used by LightIndicator.

    Attributes:
        name: Device name used by discovery.
        enabled: Whether the light is on.
        color: Current color name.
    """

    def __init__(self, name: str = "Light", enabled: bool = False, color: str = "white") -> None:
        self.name = name
        self.enabled = enabled
        self.color = color

    def turn_on(self) -> None:
        self.enabled = True

    def turn_off(self) -> None:
        self.enabled = False

    def set_color(self, color: str) -> None:
        self.color = color
