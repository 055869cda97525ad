"""
Airlock - Cycling controller for pressurized rooms

Sequences door locking, atmosphere transfer and door release so that a
room bounded by interior and exterior doors is never opened while it sits
in an unsafe intermediate pressure state. Several airlocks share a single
re-trigger timer through one registry.

Safety rules:
- Doors are locked before any pressure transfer begins
- Doors are unlocked only once the target pressure is confirmed
- A stalled device stalls its cycle; it never aborts it halfway
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
