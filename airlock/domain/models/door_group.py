"""Door group - aggregate facade over a set of doors.

A DoorGroup holds no state beyond its members. Every command fans out to
all members without waiting for confirmation; the aggregate predicate is
re-polled on later ticks. An unreachable door simply keeps reporting
"not closed", which stalls a cycle instead of failing it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from airlock.domain.ports.door import DoorPort


@dataclass(frozen=True)
class DoorGroup:
    """Ordered, immutable set of doors commanded as one unit.

    Attributes:
        name: Label for the group (e.g. "interior", "exterior", "all").
        doors: Member doors in discovery order.
    """

    name: str
    doors: tuple[DoorPort, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Convert lists to tuples for immutability."""
        if not isinstance(self.doors, tuple):
            object.__setattr__(self, "doors", tuple(self.doors))

    def __len__(self) -> int:
        return len(self.doors)

    def __iter__(self) -> Iterator[DoorPort]:
        return iter(self.doors)

    def __add__(self, other: DoorGroup) -> DoorGroup:
        return DoorGroup(name=f"{self.name}+{other.name}", doors=self.doors + other.doors)

    @property
    def is_empty(self) -> bool:
        """True if the group has no members."""
        return not self.doors

    @property
    def all_closed(self) -> bool:
        """True iff every member reports closed (vacuously true when empty)."""
        return all(door.is_closed() for door in self.doors)

    def close(self) -> None:
        """Command every member to close."""
        for door in self.doors:
            door.close()

    def open(self) -> None:
        """Command every member to open."""
        for door in self.doors:
            door.open()

    def set_locked(self, locked: bool) -> None:
        """Lock or unlock every member.

        Args:
            locked: True to lock, False to unlock.
        """
        for door in self.doors:
            door.set_locked(locked)
