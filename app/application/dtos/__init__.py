"""Application DTOs: search read models and audit log entries."""

from app.application.dtos.audit_log import (
    AuditLogEntryCreate,
    AuditLogResult,
    SearchAuditEvent,
)
from app.application.dtos.search import (
    FieldMatch,
    RankedRecord,
    RecordMatch,
    SearchOutcome,
    SearchResultItem,
)

__all__ = [
    "AuditLogEntryCreate",
    "AuditLogResult",
    "FieldMatch",
    "RankedRecord",
    "RecordMatch",
    "SearchAuditEvent",
    "SearchOutcome",
    "SearchResultItem",
]
