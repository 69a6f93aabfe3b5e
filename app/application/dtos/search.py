"""DTOs for search matching, ranking, and results (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.entities.records import SearchableRecord
from app.domain.enums import RecordKind


@dataclass(frozen=True)
class FieldMatch:
    """One searchable field that contains the query."""

    field_name: str
    strength: float
    priority_rank: int  # 0 = highest-priority field for the record kind


@dataclass(frozen=True)
class RecordMatch:
    """A candidate record with every field that matched (at least one)."""

    record: SearchableRecord
    field_matches: tuple[FieldMatch, ...]

    @property
    def best_priority_rank(self) -> int:
        return min(m.priority_rank for m in self.field_matches)

    @property
    def matched_fields(self) -> tuple[str, ...]:
        """Matched field names in priority order."""
        ordered = sorted(self.field_matches, key=lambda m: m.priority_rank)
        return tuple(m.field_name for m in ordered)


@dataclass(frozen=True)
class RankedRecord:
    """A matched record with its collapsed relevance score."""

    match: RecordMatch
    score: float

    @property
    def record(self) -> SearchableRecord:
        return self.match.record


@dataclass(frozen=True)
class SearchResultItem:
    """Single search hit (read-model). Produced per query, never persisted."""

    kind: RecordKind
    record_id: str
    display_name: str
    display_summary: str
    relevance_score: float
    is_public: bool
    created_at: datetime


@dataclass(frozen=True)
class SearchOutcome:
    """Ordered, capped result list plus whether the cap was reached."""

    results: list[SearchResultItem] = field(default_factory=list)
    truncated: bool = False
