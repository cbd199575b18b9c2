import logging
from enum import Enum
from typing import Callable, Optional
from dataclasses import dataclass, field

from ..events.bus import Event, EventBus


class ErrorSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass(kw_only=True)
class ErrorOccurredEvent(Event):
    error: Exception
    severity: ErrorSeverity
    context: dict = field(default_factory=dict)


class ErrorHandler:
    """Report a failure once: to the log, the event bus and the status area."""

    def __init__(self, logger: logging.Logger, event_bus: Optional[EventBus] = None):
        self._logger = logger
        self._events = event_bus
        self._status_callback: Optional[Callable[[str, ErrorSeverity], None]] = None
        self.last_error: Optional[Exception] = None

    def register_status_callback(self, callback: Callable[[str, ErrorSeverity], None]):
        self._status_callback = callback

    def handle(self, error: Exception, severity: ErrorSeverity = ErrorSeverity.ERROR, context: dict = None):
        self.last_error = error

        log_method = getattr(self._logger, severity.value, self._logger.error)
        log_method(f"{error.__class__.__name__}: {error}", extra=context or {})

        if self._events is not None:
            self._events.publish(ErrorOccurredEvent(
                error=error,
                severity=severity,
                context=context or {}
            ))

        if self._status_callback and severity in (ErrorSeverity.WARNING, ErrorSeverity.ERROR, ErrorSeverity.CRITICAL):
            self._status_callback(str(error), severity)
