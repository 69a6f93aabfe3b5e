"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain entities only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import date

    from app.application.dtos.audit_log import AuditLogEntryCreate, AuditLogResult
    from app.domain.entities.records import (
        DeceasedRecordEntity,
        InvestigationReportEntity,
    )


# Record store interface (read-only)
class IRecordStore(Protocol):
    """Protocol for the record store the search service reads from.

    Implementations may return every record of a kind or a store-side
    filtered subset, as long as every record whose searchable fields could
    contain the normalized query is included.
    """

    async def list_deceased_records(self, query: str) -> list[DeceasedRecordEntity]:
        """Return deceased-record candidates for the normalized query."""

    async def list_deceased_records_by_date_of_death(
        self, day: date
    ) -> list[DeceasedRecordEntity]:
        """Return deceased records whose date_of_death is exactly day."""

    async def list_investigation_reports(
        self, query: str
    ) -> list[InvestigationReportEntity]:
        """Return investigation-report candidates for the normalized query."""


# Audit log repository interface (append-only)
class IAuditLogRepository(Protocol):
    """Protocol for the append-only audit log."""

    async def create(self, entry: AuditLogEntryCreate) -> AuditLogResult:
        """Append one audit log entry; return created record."""
