"""Record store repository: candidate reads for universal search.

Narrows candidates store-side with a case-insensitive LIKE per query
token across the searchable fields (wildcards escaped so the query is
literal). Every record whose field contains the whole normalized query
also contains each of its tokens, so the in-process matcher still sees
the full candidate set. On SQLite this relies on the Unicode-aware lower()
installed by database.install_sqlite_unicode_lower.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date
from typing import Any

from sqlalchemy import ColumnElement, and_, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.query_normalizer import tokenize
from app.application.services.record_matcher import (
    DECEASED_SEARCH_FIELDS,
    INVESTIGATION_REPORT_SEARCH_FIELDS,
)
from app.domain.entities.records import DeceasedRecordEntity, InvestigationReportEntity
from app.domain.enums import IdentificationStatus, RecordKind, ReportStatus
from app.domain.exceptions import StoreUnavailableException
from app.infrastructure.persistence.models import DeceasedRecord, InvestigationReport
from app.shared.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)


def _escape_like(term: str) -> str:
    """Escape LIKE wildcards % and _ (and the escape char) so term is literal."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _token_filter(model: Any, fields: Sequence[str], query: str) -> ColumnElement[bool] | None:
    """AND over tokens of (OR over fields of field ILIKE %token%)."""
    tokens = tokenize(query)
    if not tokens:
        return None
    per_token = []
    for token in tokens:
        pattern = f"%{_escape_like(token)}%"
        per_token.append(
            or_(*(getattr(model, f).ilike(pattern, escape="\\") for f in fields))
        )
    return and_(*per_token)


def _deceased_to_entity(row: DeceasedRecord) -> DeceasedRecordEntity | None:
    """Map ORM to domain entity; None (logged) when a stored enum value is unknown."""
    try:
        status = IdentificationStatus(row.identification_status)
    except ValueError:
        logger.warning(
            "Skipping deceased record %s: unknown identification_status %r",
            row.id,
            row.identification_status,
        )
        return None
    return DeceasedRecordEntity(
        id=row.id,
        full_name=row.full_name,
        created_at=ensure_utc(row.created_at),
        location_found=row.location_found,
        date_of_death=row.date_of_death,
        time_of_death=row.time_of_death,
        date_found=row.date_found,
        time_found=row.time_found,
        condition_of_body=row.condition_of_body,
        clothing_description=row.clothing_description,
        personal_effects=row.personal_effects,
        distinguishing_marks=row.distinguishing_marks,
        identification_status=status,
        is_public_viewable=bool(row.is_public_viewable),
    )


def _report_to_entity(row: InvestigationReport) -> InvestigationReportEntity | None:
    """Map ORM to domain entity; None (logged) when a stored enum value is unknown."""
    try:
        status = ReportStatus(row.report_status)
    except ValueError:
        logger.warning(
            "Skipping police report %s: unknown report_status %r",
            row.id,
            row.report_status,
        )
        return None
    return InvestigationReportEntity(
        id=row.id,
        case_id=row.case_id,
        deceased_record_id=row.deceased_record_id,
        created_at=ensure_utc(row.created_at),
        jurisdiction=row.jurisdiction,
        circumstances_of_discovery=row.circumstances_of_discovery,
        evidence_collected=row.evidence_collected,
        officer_notes=row.officer_notes,
        report_status=status,
    )


class RecordStoreRepository:
    """Read-only access to deceased records and police reports. Implements IRecordStore."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_deceased_records(self, query: str) -> list[DeceasedRecordEntity]:
        """Return deceased records whose searchable fields may contain the query."""
        rows = await self._fetch(
            DeceasedRecord,
            _token_filter(DeceasedRecord, DECEASED_SEARCH_FIELDS, query),
            RecordKind.DECEASED,
        )
        return [e for e in (_deceased_to_entity(r) for r in rows) if e is not None]

    async def list_deceased_records_by_date_of_death(
        self, day: date
    ) -> list[DeceasedRecordEntity]:
        """Return deceased records that died on the given day."""
        rows = await self._fetch(
            DeceasedRecord, DeceasedRecord.date_of_death == day, RecordKind.DECEASED
        )
        return [e for e in (_deceased_to_entity(r) for r in rows) if e is not None]

    async def list_investigation_reports(
        self, query: str
    ) -> list[InvestigationReportEntity]:
        """Return police reports whose searchable fields may contain the query."""
        rows = await self._fetch(
            InvestigationReport,
            _token_filter(InvestigationReport, INVESTIGATION_REPORT_SEARCH_FIELDS, query),
            RecordKind.INVESTIGATION_REPORT,
        )
        return [e for e in (_report_to_entity(r) for r in rows) if e is not None]

    async def _fetch(
        self, model: Any, condition: ColumnElement[bool] | None, kind: RecordKind
    ) -> list[Any]:
        stmt = select(model).order_by(model.created_at.desc(), model.id)
        if condition is not None:
            stmt = stmt.where(condition)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Record store read failed (kind=%s): %s", kind.value, exc)
            raise StoreUnavailableException(type(exc).__name__, kind.value) from exc
        return list(result.scalars().all())
