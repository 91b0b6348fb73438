"""
Data Models Package

This package contains all Pydantic models used in the Ledger Store.
Everything read from or written to the store conforms to these schemas.
"""

from ledgerstore.models.records import (
    Article,
    ArticleType,
    Document,
    Transaction,
    Wallet,
)
from ledgerstore.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditSeverity,
    StoreEventType,
)

__all__ = [
    # Record models
    "Article",
    "ArticleType",
    "Document",
    "Transaction",
    "Wallet",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditSeverity",
    "StoreEventType",
]
