"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import (
    ActorContext,
    DeceasedRecordEntity,
    InvestigationReportEntity,
    SearchableRecord,
)
from app.domain.enums import (
    ActorRole,
    ApprovalStatus,
    IdentificationStatus,
    RecordKind,
    ReportStatus,
    SearchField,
    SearchScope,
)
from app.domain.exceptions import (
    AuditEmissionFailedException,
    MalformedRecordException,
    RecordSearchException,
    SqlNotConfiguredException,
    StoreUnavailableException,
    ValidationException,
)

__all__ = [
    # Entities
    "ActorContext",
    "DeceasedRecordEntity",
    "InvestigationReportEntity",
    "SearchableRecord",
    # Enums
    "ActorRole",
    "ApprovalStatus",
    "IdentificationStatus",
    "RecordKind",
    "ReportStatus",
    "SearchField",
    "SearchScope",
    # Exceptions
    "AuditEmissionFailedException",
    "MalformedRecordException",
    "RecordSearchException",
    "SqlNotConfiguredException",
    "StoreUnavailableException",
    "ValidationException",
]
