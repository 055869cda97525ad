"""Airlock discovery port.

Discovery turns an airlock name into concrete device handles on every
(re)connection. The core never matches names or parses device labels
itself; all of that lives behind this port.
"""

from __future__ import annotations

from typing import Protocol

from airlock.domain.models.airlock_membership import AirlockMembership


class AirlockDiscoveryPort(Protocol):
    """Protocol for locating the devices that make up a named airlock."""

    def discover(self, airlock_name: str) -> AirlockMembership:
        """Return the devices currently bound to an airlock.

        Args:
            airlock_name: Configured airlock name.

        Returns:
            The discovered membership. It may be incomplete; the Airlock
            built from it decides whether it is valid.
        """
        ...
