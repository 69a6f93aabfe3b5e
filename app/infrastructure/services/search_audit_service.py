"""Search audit service: appends search_performed entries to audit_logs.

Implements ISearchAuditEmitter. Each emission runs in its own session and
transaction so it never shares state with the search read.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.dtos.audit_log import (
    AuditLogEntryCreate,
    AuditLogResult,
    SearchAuditEvent,
)
from app.domain.enums import SearchScope
from app.domain.exceptions import AuditEmissionFailedException
from app.infrastructure.persistence.repositories.audit_log_repo import AuditLogRepository

logger = logging.getLogger(__name__)

# A search over every kind touches no single table, so table_name stays empty.
AUDIT_TABLE_BY_SCOPE: dict[SearchScope, str] = {
    SearchScope.DECEASED: "deceased_records",
    SearchScope.REPORTS: "police_reports",
}


class SearchAuditService:
    """Writes one audit log row per search through a dedicated session."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def emit_search_performed(self, event: SearchAuditEvent) -> None:
        """Append the event; raise AuditEmissionFailedException on storage errors."""
        await self._append(
            AuditLogEntryCreate(
                action=event.action,
                user_id=event.actor_id,
                table_name=AUDIT_TABLE_BY_SCOPE.get(event.scope),
                details=event.details(),
            )
        )

    async def _append(self, entry: AuditLogEntryCreate) -> AuditLogResult:
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    result = await AuditLogRepository(session).create(entry)
        except SQLAlchemyError as exc:
            logger.error("Audit log insert failed for %s: %s", entry.action, exc)
            raise AuditEmissionFailedException(entry.action, type(exc).__name__) from exc
        logger.debug("Audit log entry %s recorded (%s)", result.id, entry.action)
        return result
