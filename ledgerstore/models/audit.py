"""
Audit Models for Ledger Store

Every load and save of the store is logged for audit purposes.
This provides:
1. Traceability of what was read from and written to disk
2. Visibility of silently tolerated damage (missing or unbalanced collections)
3. A record of every skipped record under the skip policy

DESIGN DECISION: Events are plain data. Emitting them is the job of
ledgerstore.audit.AuditLogger.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StoreEventType(str, Enum):
    """Types of events we audit."""
    # Loading
    STORE_LOADED = "store_loaded"
    STORE_MISSING = "store_missing"
    COLLECTION_MISSING = "collection_missing"
    COLLECTION_UNBALANCED = "collection_unbalanced"
    RECORD_SKIPPED = "record_skipped"
    DECODE_FAILED = "decode_failed"
    LOAD_FAILED = "load_failed"

    # Saving
    STORE_SAVED = "store_saved"
    SAVE_FAILED = "save_failed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    One load or save call produces several events sharing a correlation ID.
    """

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    event_type: StoreEventType
    severity: AuditSeverity = AuditSeverity.INFO

    store_path: Optional[str] = Field(
        default=None,
        description="Store file the event relates to"
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID shared by all events of one load or save call"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(default_factory=dict)

    error_message: Optional[str] = None

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "store_path": self.store_path,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.store_loaded(path, document.counts(), correlation_id)
        event = AuditEventBuilder.record_skipped("transactions", 3, reason, correlation_id)
    """

    @staticmethod
    def store_loaded(
        store_path: str,
        counts: dict[str, int],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=StoreEventType.STORE_LOADED,
            store_path=store_path,
            correlation_id=correlation_id,
            description="Store loaded",
            details={"counts": counts},
        )

    @staticmethod
    def store_missing(
        store_path: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=StoreEventType.STORE_MISSING,
            store_path=store_path,
            correlation_id=correlation_id,
            description="Store file not found, starting empty",
        )

    @staticmethod
    def collection_missing(
        key: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=StoreEventType.COLLECTION_MISSING,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Collection '{key}' not present, decoded as empty",
            details={"collection": key},
        )

    @staticmethod
    def collection_unbalanced(
        key: str,
        start: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=StoreEventType.COLLECTION_UNBALANCED,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Collection '{key}' has no closing bracket, decoded as empty",
            details={"collection": key, "start": start},
        )

    @staticmethod
    def record_skipped(
        collection: str,
        index: int,
        reason: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=StoreEventType.RECORD_SKIPPED,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Skipped malformed record {collection}[{index}]",
            details={"collection": collection, "index": index},
            error_message=reason,
        )

    @staticmethod
    def decode_failed(
        store_path: Optional[str],
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=StoreEventType.DECODE_FAILED,
            severity=AuditSeverity.ERROR,
            store_path=store_path,
            correlation_id=correlation_id,
            description="Store text could not be decoded",
            error_message=error_message,
        )

    @staticmethod
    def load_failed(
        store_path: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=StoreEventType.LOAD_FAILED,
            severity=AuditSeverity.ERROR,
            store_path=store_path,
            correlation_id=correlation_id,
            description="Store could not be read",
            error_message=error_message,
        )

    @staticmethod
    def store_saved(
        store_path: str,
        counts: dict[str, int],
        atomic: bool,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=StoreEventType.STORE_SAVED,
            store_path=store_path,
            correlation_id=correlation_id,
            description="Store saved",
            details={"counts": counts, "atomic": atomic},
        )

    @staticmethod
    def save_failed(
        store_path: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=StoreEventType.SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            store_path=store_path,
            correlation_id=correlation_id,
            description="Store could not be written",
            error_message=error_message,
        )
