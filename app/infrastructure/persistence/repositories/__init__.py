"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.audit_log_repo import AuditLogRepository
from app.infrastructure.persistence.repositories.record_store_repo import (
    RecordStoreRepository,
)

__all__ = [
    "AuditLogRepository",
    "RecordStoreRepository",
]
