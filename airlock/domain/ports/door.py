"""Door port - contract for a single controllable barrier.

Commands are fire-and-forget: they return immediately and never confirm
completion. Callers learn the outcome by polling ``is_closed`` on a later
tick. An unreachable door keeps reporting its last (or a failure) state
instead of raising.
"""

from __future__ import annotations

from typing import Protocol


class DoorPort(Protocol):
    """Protocol for a door the airlock can close, open and lock."""

    def is_closed(self) -> bool:
        """Return True if the door currently reports fully closed."""
        ...

    def close(self) -> None:
        """Command the door to close."""
        ...

    def open(self) -> None:
        """Command the door to open."""
        ...

    def set_locked(self, locked: bool) -> None:
        """Lock or unlock the door.

        A locked door ignores manual open requests until unlocked.

        Args:
            locked: True to lock, False to unlock.
        """
        ...
