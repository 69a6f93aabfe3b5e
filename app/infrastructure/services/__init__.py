"""Infrastructure implementations of application service interfaces."""

from app.infrastructure.services.search_audit_service import SearchAuditService

__all__ = [
    "SearchAuditService",
]
