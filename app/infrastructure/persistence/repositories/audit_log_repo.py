"""Audit log repository. Append-only; implements IAuditLogRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.audit_log import AuditLogEntryCreate, AuditLogResult
from app.infrastructure.persistence.models.audit_log import AuditLog
from app.shared.utils.datetime import ensure_utc
from app.shared.utils.generators import generate_cuid


def _orm_to_result(row: AuditLog) -> AuditLogResult:
    """Map ORM to application DTO."""
    return AuditLogResult(
        id=row.id,
        action=row.action,
        user_id=row.user_id,
        table_name=row.table_name,
        record_id=row.record_id,
        details=row.details,
        ip_address=row.ip_address,
        created_at=ensure_utc(row.created_at),
    )


class AuditLogRepository:
    """Append-only audit log repository. No update/delete."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create(self, entry: AuditLogEntryCreate) -> AuditLogResult:
        """Append one audit log entry; return created record."""
        row = AuditLog(
            id=generate_cuid(),
            user_id=entry.user_id,
            action=entry.action,
            table_name=entry.table_name,
            record_id=entry.record_id,
            details=entry.details,
            ip_address=entry.ip_address,
        )
        self.db.add(row)
        await self.db.flush()
        await self.db.refresh(row)
        return _orm_to_result(row)

    async def list_by_action(
        self, action: str, *, skip: int = 0, limit: int = 100
    ) -> list[AuditLogResult]:
        """List entries for one action (newest first)."""
        stmt = (
            select(AuditLog)
            .where(AuditLog.action == action)
            .order_by(AuditLog.created_at.desc(), AuditLog.id)
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return [_orm_to_result(row) for row in result.scalars().all()]
