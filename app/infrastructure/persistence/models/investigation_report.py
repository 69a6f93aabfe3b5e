"""Investigation (police) report ORM model. Linked to exactly one deceased record."""

from sqlalchemy import ForeignKey, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.domain.enums import ReportStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import RecordModel


class InvestigationReport(RecordModel, Base):
    """Police report filed against a deceased record. Never shown to the public."""

    __tablename__ = "police_reports"

    case_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    deceased_record_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("deceased_records.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    jurisdiction: Mapped[str | None] = mapped_column(String(255), nullable=True)
    circumstances_of_discovery: Mapped[str | None] = mapped_column(Text, nullable=True)
    evidence_collected: Mapped[str | None] = mapped_column(Text, nullable=True)
    officer_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    report_status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=ReportStatus.DRAFT.value,
        server_default=text(f"'{ReportStatus.DRAFT.value}'"),
    )

    deceased_record = relationship("DeceasedRecord", back_populates="investigation_reports")
