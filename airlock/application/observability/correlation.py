"""Trigger correlation for airlock log entries.

The registry only ever runs in response to an external trigger: a connect,
a cycle command or a timer tick. Each trigger gets its own correlation ID,
prefixed with its kind, so the log lines of one tick read apart from those
of a cycle command::

    begin_trigger("tick")  # -> "tick-9b1d0c6e..."
    registry.tick_all()
"""

from contextvars import ContextVar
from uuid import uuid4

from structlog.typing import EventDict, WrappedLogger

TRIGGER_KINDS = frozenset({"connect", "cycle", "tick"})

_correlation_id: ContextVar[str] = ContextVar("airlock_correlation_id", default="")


def begin_trigger(kind: str) -> str:
    """Make a fresh correlation ID current for one external trigger.

    Args:
        kind: One of ``TRIGGER_KINDS``.

    Returns:
        The new correlation ID, ``"<kind>-<hex>"``.

    Raises:
        ValueError: If kind is not a known trigger kind.
    """
    if kind not in TRIGGER_KINDS:
        raise ValueError(f"Unknown trigger kind: {kind!r}")
    correlation_id = f"{kind}-{uuid4().hex}"
    _correlation_id.set(correlation_id)
    return correlation_id


def get_correlation_id() -> str:
    """Current trigger's correlation ID, or "" outside any trigger."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    _correlation_id.set(correlation_id)


def correlation_id_processor(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add the current correlation_id unless the entry already carries one."""
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict
