"""Audit log DTOs (application layer)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.domain.enums import SearchScope
from app.shared.utils.datetime import utc_isoformat


@dataclass(frozen=True)
class SearchAuditEvent:
    """Outbound audit event emitted once per non-trivial search."""

    actor_role: str
    query_excerpt: str
    result_count: int
    timestamp: datetime
    actor_id: str | None = None
    scope: SearchScope = SearchScope.ALL
    action: str = "search_performed"

    def details(self) -> dict[str, Any]:
        """Return the JSON-serializable details payload stored with the entry."""
        return {
            "actor_role": self.actor_role,
            "query_excerpt": self.query_excerpt,
            "result_count": self.result_count,
            "timestamp": utc_isoformat(self.timestamp),
        }


@dataclass
class AuditLogEntryCreate:
    """Input for appending one audit log entry."""

    action: str
    user_id: str | None = None
    table_name: str | None = None
    record_id: str | None = None
    details: dict[str, Any] = field(default_factory=dict)
    ip_address: str | None = None


@dataclass
class AuditLogResult:
    """Audit log entry read model."""

    id: str
    action: str
    user_id: str | None
    table_name: str | None
    record_id: str | None
    details: dict[str, Any] | None
    ip_address: str | None
    created_at: datetime
