"""Logging mixin for the airlock application services.

A service binds its class name and a component once, then asks for an
operation-scoped logger per call::

    class AirlockRegistryService(LoggingMixin):
        def __init__(self, ...) -> None:
            self._init_logger(component="registry")

        def tick_all(self) -> ...:
            log = self._log_operation("tick_all", cycling=["A"])
            log.info("tick_started")
"""

import structlog

from airlock.application.observability.correlation import get_correlation_id


class LoggingMixin:
    """Structured logging for services driven by airlock triggers.

    Operation loggers carry ``service``, ``component``, ``operation`` and,
    inside a trigger, its ``correlation_id``.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str) -> None:
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(self, operation: str, **context: object) -> structlog.BoundLogger:
        """Logger bound to one operation of the current trigger.

        Args:
            operation: Operation name, e.g. ``"dispatch_cycle"``.
            **context: Extra fields such as ``airlock_name``.
        """
        correlation_id = get_correlation_id()
        if correlation_id:
            context["correlation_id"] = correlation_id
        return self._log.bind(operation=operation, **context)
