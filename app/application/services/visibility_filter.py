"""Visibility filter: actor-based access control over ranked search results.

Public actors only see deceased records flagged is_public_viewable and never
see investigation reports. Professional roles see everything. Display
summaries for public actors are built from public-safe fields only.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from app.application.dtos.search import RankedRecord, SearchResultItem
from app.domain.entities.actor import ActorContext
from app.domain.entities.records import (
    DeceasedRecordEntity,
    InvestigationReportEntity,
    SearchableRecord,
)

DEFAULT_MAX_RESULTS = 100

# Fields a family member may see in a public summary (condition_of_body is professional-only).
PUBLIC_SUMMARY_FIELDS = frozenset(
    {
        "location_found",
        "distinguishing_marks",
        "clothing_description",
        "personal_effects",
    }
)

_SUMMARY_LABELS = {
    "location_found": "Found at",
    "distinguishing_marks": "Marks",
    "clothing_description": "Clothing",
    "personal_effects": "Effects",
    "condition_of_body": "Condition",
    "date_of_death": "Died",
    "jurisdiction": "Jurisdiction",
    "circumstances_of_discovery": "Circumstances",
    "evidence_collected": "Evidence",
    "officer_notes": "Notes",
}

_SUMMARY_SEPARATOR = " · "


def is_visible(record: SearchableRecord, actor: ActorContext) -> bool:
    """Return True if the actor may see the record."""
    if actor.role.is_professional:
        return True
    return isinstance(record, DeceasedRecordEntity) and record.is_public_viewable


def filter_visible(
    ranked: Iterable[RankedRecord],
    actor: ActorContext,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> list[RankedRecord]:
    """Keep records the actor may see, preserving order, capped at max_results."""
    visible: list[RankedRecord] = []
    for item in ranked:
        if not is_visible(item.record, actor):
            continue
        visible.append(item)
        if len(visible) >= max_results:
            break
    return visible


def _summary_fields(
    record: SearchableRecord, matched: tuple[str, ...], actor: ActorContext
) -> list[str]:
    if isinstance(record, DeceasedRecordEntity):
        # Always lead with where the person was found, then what matched.
        fields = ["location_found", *(f for f in matched if f != "full_name")]
        if not actor.role.is_professional:
            fields = [f for f in fields if f in PUBLIC_SUMMARY_FIELDS]
    else:
        fields = ["jurisdiction", *matched]
    return list(dict.fromkeys(fields))


def build_summary(
    record: SearchableRecord, matched: tuple[str, ...], actor: ActorContext
) -> str:
    """Concatenate labelled descriptive/matched fields the actor may see."""
    parts: list[str] = []
    for name in _summary_fields(record, matched, actor):
        value = getattr(record, name, None)
        if isinstance(value, date):
            value = value.isoformat()
        if value and value.strip():
            parts.append(f"{_SUMMARY_LABELS[name]}: {value.strip()}")
    if isinstance(record, DeceasedRecordEntity) and record.date_found is not None:
        parts.append(f"Found on: {record.date_found.isoformat()}")
    if isinstance(record, DeceasedRecordEntity) and actor.role.is_professional:
        parts.append(f"Status: {record.identification_status.value}")
    return _SUMMARY_SEPARATOR.join(parts)


def display_name(record: SearchableRecord) -> str:
    if isinstance(record, InvestigationReportEntity):
        return f"Case {record.case_id}"
    return record.full_name.strip()


def to_result_item(ranked: RankedRecord, actor: ActorContext) -> SearchResultItem:
    """Build the outbound result for one visible ranked record."""
    record = ranked.record
    is_public = isinstance(record, DeceasedRecordEntity) and record.is_public_viewable
    return SearchResultItem(
        kind=record.kind,
        record_id=record.id,
        display_name=display_name(record),
        display_summary=build_summary(record, ranked.match.matched_fields, actor),
        relevance_score=ranked.score,
        is_public=is_public,
        created_at=record.created_at,
    )
