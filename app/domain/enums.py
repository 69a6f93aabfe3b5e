"""Domain enumerations for record search.

Enums represent fixed sets of domain values (record kinds, roles, statuses).
"""

from enum import Enum


class RecordKind(str, Enum):
    """Discriminant tag for every searchable record."""

    DECEASED = "deceased"
    INVESTIGATION_REPORT = "investigation_report"


class ActorRole(str, Enum):
    """Effective role of the requesting actor.

    Only PUBLIC is restricted by the visibility filter; every other role
    is a professional role and sees all records.
    """

    PUBLIC = "public"
    MORTUARY_STAFF = "mortuary_staff"
    POLICE = "police"
    ADMIN = "admin"

    @property
    def is_professional(self) -> bool:
        return self is not ActorRole.PUBLIC

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid role values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [role.value for role in cls]


class ApprovalStatus(str, Enum):
    """Account approval state, tracked by the external user service."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class IdentificationStatus(str, Enum):
    """Identification progress of a deceased record."""

    UNIDENTIFIED = "unidentified"
    PENDING_CONFIRMATION = "pending_confirmation"
    IDENTIFIED = "identified"


class ReportStatus(str, Enum):
    """Lifecycle of an investigation report."""

    DRAFT = "draft"
    SUBMITTED = "submitted"
    UNDER_REVIEW = "under_review"
    CLOSED = "closed"


class SearchScope(str, Enum):
    """Which record kinds a search reads and matches."""

    ALL = "all"
    DECEASED = "deceased"
    REPORTS = "reports"

    def includes(self, kind: RecordKind) -> bool:
        if self is SearchScope.ALL:
            return True
        if self is SearchScope.DECEASED:
            return kind is RecordKind.DECEASED
        return kind is RecordKind.INVESTIGATION_REPORT


class SearchField(str, Enum):
    """Which fields a search matches against.

    ``any`` covers every searchable field of each kind. The other modes are
    single-field lookups on deceased records; ``date`` takes an ISO date and
    matches date_of_death exactly.
    """

    ANY = "any"
    NAME = "name"
    LOCATION = "location"
    DATE = "date"

    def includes(self, kind: RecordKind) -> bool:
        return self is SearchField.ANY or kind is RecordKind.DECEASED
