"""Searchable record entities.

Represents the two record kinds the search service reads, independent of
persistence. SearchableRecord is a tagged union discriminated by ``kind``.
"""

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import ClassVar, Union

from app.domain.enums import IdentificationStatus, RecordKind, ReportStatus


@dataclass(frozen=True)
class DeceasedRecordEntity:
    """Deceased-person record (read model for search).

    Free-text fields are optional; full_name is required for matching and
    display and is checked by missing_required_field() rather than on
    construction, so one bad row never prevents loading its neighbours.
    """

    kind: ClassVar[RecordKind] = RecordKind.DECEASED

    id: str
    full_name: str | None
    created_at: datetime
    location_found: str | None = None
    date_of_death: date | None = None
    time_of_death: time | None = None
    date_found: date | None = None
    time_found: time | None = None
    condition_of_body: str | None = None
    clothing_description: str | None = None
    personal_effects: str | None = None
    distinguishing_marks: str | None = None
    identification_status: IdentificationStatus = IdentificationStatus.UNIDENTIFIED
    is_public_viewable: bool = False

    def missing_required_field(self) -> str | None:
        """Return the first required field that is empty, or None when well formed."""
        if not self.id:
            return "id"
        if not self.full_name or not self.full_name.strip():
            return "full_name"
        if self.created_at is None:
            return "created_at"
        return None


@dataclass(frozen=True)
class InvestigationReportEntity:
    """Investigation (police) report linked to a deceased record.

    Never visible to public actors.
    """

    kind: ClassVar[RecordKind] = RecordKind.INVESTIGATION_REPORT

    id: str
    case_id: str | None
    deceased_record_id: str
    created_at: datetime
    jurisdiction: str | None = None
    circumstances_of_discovery: str | None = None
    evidence_collected: str | None = None
    officer_notes: str | None = None
    report_status: ReportStatus = ReportStatus.DRAFT

    def missing_required_field(self) -> str | None:
        """Return the first required field that is empty, or None when well formed."""
        if not self.id:
            return "id"
        if not self.case_id or not self.case_id.strip():
            return "case_id"
        if self.created_at is None:
            return "created_at"
        return None


SearchableRecord = Union[DeceasedRecordEntity, InvestigationReportEntity]
