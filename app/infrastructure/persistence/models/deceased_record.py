"""Deceased record ORM model. Written by data-entry staff; read by search."""

from datetime import date, time

from sqlalchemy import Boolean, Date, String, Text, Time, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.domain.enums import IdentificationStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import RecordModel


class DeceasedRecord(RecordModel, Base):
    """Deceased-person record with structured and free-text descriptive fields."""

    __tablename__ = "deceased_records"

    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    date_of_death: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)
    time_of_death: Mapped[time | None] = mapped_column(Time, nullable=True)
    date_found: Mapped[date | None] = mapped_column(Date, nullable=True)
    time_found: Mapped[time | None] = mapped_column(Time, nullable=True)
    location_found: Mapped[str | None] = mapped_column(String(500), nullable=True)
    condition_of_body: Mapped[str | None] = mapped_column(Text, nullable=True)
    clothing_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    personal_effects: Mapped[str | None] = mapped_column(Text, nullable=True)
    distinguishing_marks: Mapped[str | None] = mapped_column(Text, nullable=True)
    identification_status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default=IdentificationStatus.UNIDENTIFIED.value,
        server_default=text(f"'{IdentificationStatus.UNIDENTIFIED.value}'"),
    )
    is_public_viewable: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=text("false"), index=True
    )

    investigation_reports = relationship(
        "InvestigationReport", back_populates="deceased_record", passive_deletes=True
    )
