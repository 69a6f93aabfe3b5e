"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.audit_log import AuditLog
from app.infrastructure.persistence.models.deceased_record import DeceasedRecord
from app.infrastructure.persistence.models.investigation_report import (
    InvestigationReport,
)
from app.infrastructure.persistence.models.mixins import (
    CreatedByMixin,
    CuidMixin,
    RecordModel,
    TimestampMixin,
)

__all__ = [
    "AuditLog",
    "CreatedByMixin",
    "CuidMixin",
    "DeceasedRecord",
    "InvestigationReport",
    "RecordModel",
    "TimestampMixin",
]
