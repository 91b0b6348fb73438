"""
Audit Logger

DESIGN DECISION: Every load and save of the store is logged.
Damage the decoder tolerates (a missing collection, an unbalanced bracket,
a skipped record) would otherwise be invisible, so it is always reported.

The audit logger:
- Is synchronous, like the load/save calls it reports on
- Gracefully handles failures (a broken sink or an event that fails
  validation never breaks a load or save)
- Supports correlation IDs to tie together the events of one call
"""

from typing import Any, Callable, Optional
from uuid import UUID, uuid4

import structlog
from pydantic import ValidationError

from ledgerstore.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


EventSink = Callable[[AuditEvent], None]


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (structlog)
    2. An optional sink, e.g. a status view kept by the caller
    """

    def __init__(self, sink: Optional[EventSink] = None):
        """
        Initialize audit logger.

        Args:
            sink: Callable receiving every event.
                  If None, only logs locally.
        """
        self._sink = sink
        self._logger = structlog.get_logger("ledgerstore")

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Hands the event to the sink if one is set.

        Returns True if the sink accepted the event (or no sink configured).
        """
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._sink:
            try:
                self._sink(event)
            except Exception as e:
                self._logger.error(
                    "audit_sink_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def _emit(self, build: Callable[..., AuditEvent], *args: Any) -> bool:
        """Build an event and log it. An event that fails validation is reported, not raised."""
        try:
            event = build(*args)
        except ValidationError as e:
            self._logger.error(
                "audit_event_invalid",
                builder=build.__name__,
                error=str(e),
            )
            return False
        return self.log(event)

    def log_collection_missing(self, key: str, correlation_id: Optional[UUID] = None) -> None:
        self._emit(AuditEventBuilder.collection_missing, key, correlation_id)

    def log_collection_unbalanced(
        self,
        key: str,
        start: int,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self._emit(AuditEventBuilder.collection_unbalanced, key, start, correlation_id)

    def log_record_skipped(
        self,
        collection: str,
        index: int,
        reason: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        """Log a record dropped under the skip policy."""
        self._emit(AuditEventBuilder.record_skipped, collection, index, reason, correlation_id)

    def log_store_loaded(
        self,
        store_path: str,
        counts: dict[str, int],
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self._emit(AuditEventBuilder.store_loaded, store_path, counts, correlation_id)

    def log_store_missing(self, store_path: str, correlation_id: Optional[UUID] = None) -> None:
        self._emit(AuditEventBuilder.store_missing, store_path, correlation_id)

    def log_decode_failed(
        self,
        store_path: Optional[str],
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self._emit(AuditEventBuilder.decode_failed, store_path, error_message, correlation_id)

    def log_load_failed(
        self,
        store_path: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self._emit(AuditEventBuilder.load_failed, store_path, error_message, correlation_id)

    def log_store_saved(
        self,
        store_path: str,
        counts: dict[str, int],
        atomic: bool,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self._emit(AuditEventBuilder.store_saved, store_path, counts, atomic, correlation_id)

    def log_save_failed(
        self,
        store_path: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self._emit(AuditEventBuilder.save_failed, store_path, error_message, correlation_id)


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use one per load or save call and pass it to every event it emits.
    """
    return uuid4()
