"""Door stub - in-memory door for testing and simulation.

Usage:
    door = DoorStub("Airlock A Interior Door", closed=False)
    door.close()
    assert door.is_closed()

    # A door that never finishes closing
    stuck = DoorStub("Stuck Door", closed=False, stuck=True)
    stuck.close()
    assert not stuck.is_closed()
"""

from __future__ import annotations

import structlog

log = structlog.get_logger(__name__)


class DoorStub:
    """In-memory implementation of DoorPort.

    Commands take effect immediately unless the door is stuck (it then
    ignores close/open commands) or locked (it then ignores open commands,
    like a powered-down door).

    Attributes:
        name: Device name used by discovery.
        commands: Every command received, in order, for verification.
    """

    def __init__(
        self,
        name: str = "Door",
        closed: bool = True,
        locked: bool = False,
        stuck: bool = False,
    ) -> None:
        self.name = name
        self._closed = closed
        self._locked = locked
        self._stuck = stuck
        self.commands: list[str] = []

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def stuck(self) -> bool:
        return self._stuck

    def is_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self.commands.append("close")
        if not self._stuck:
            self._closed = True

    def open(self) -> None:
        self.commands.append("open")
        if self._stuck or self._locked:
            log.debug("door_open_ignored", door=self.name, locked=self._locked)
            return
        self._closed = False

    def set_locked(self, locked: bool) -> None:
        self.commands.append("lock" if locked else "unlock")
        self._locked = locked

    # Test helpers

    def set_closed(self, closed: bool) -> None:
        """Force the reported closed state (external actor or sensor)."""
        self._closed = closed

    def set_stuck(self, stuck: bool) -> None:
        """Make the door ignore (or resume obeying) close/open commands."""
        self._stuck = stuck

    def clear(self) -> None:
        """Forget recorded commands."""
        self.commands.clear()
