"""Domain entities.

Pure domain models; no ORM or persistence concerns.
"""

from app.domain.entities.actor import ActorContext
from app.domain.entities.records import (
    DeceasedRecordEntity,
    InvestigationReportEntity,
    SearchableRecord,
)

__all__ = [
    "ActorContext",
    "DeceasedRecordEntity",
    "InvestigationReportEntity",
    "SearchableRecord",
]
