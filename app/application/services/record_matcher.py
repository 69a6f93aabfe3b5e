"""Multi-entity matcher: evaluates a normalized query against fixed record fields.

Each record kind has an ordered list of searchable fields (index = priority
rank, 0 highest). Matching is case-insensitive substring containment on
normalized field values, scored per field:

- 1.0 when the whole field equals the query,
- 0.7 when the query starts at a token boundary within the field,
- 0.4 for any other containment.
"""

from __future__ import annotations

from collections.abc import Collection
from datetime import date

from app.application.dtos.search import FieldMatch, RecordMatch
from app.application.services.query_normalizer import normalize_text
from app.domain.entities.records import DeceasedRecordEntity, SearchableRecord
from app.domain.enums import RecordKind, SearchField
from app.domain.exceptions import MalformedRecordException

EXACT_MATCH_STRENGTH = 1.0
TOKEN_BOUNDARY_STRENGTH = 0.7
SUBSTRING_STRENGTH = 0.4

DECEASED_SEARCH_FIELDS: tuple[str, ...] = (
    "full_name",
    "location_found",
    "distinguishing_marks",
    "clothing_description",
    "personal_effects",
    "condition_of_body",
)

INVESTIGATION_REPORT_SEARCH_FIELDS: tuple[str, ...] = (
    "jurisdiction",
    "circumstances_of_discovery",
    "evidence_collected",
    "officer_notes",
)

SEARCH_FIELDS: dict[RecordKind, tuple[str, ...]] = {
    RecordKind.DECEASED: DECEASED_SEARCH_FIELDS,
    RecordKind.INVESTIGATION_REPORT: INVESTIGATION_REPORT_SEARCH_FIELDS,
}

# Single-field modes; both fields exist on deceased records only.
FIELDS_BY_MODE: dict[SearchField, tuple[str, ...]] = {
    SearchField.NAME: ("full_name",),
    SearchField.LOCATION: ("location_found",),
}

# date_of_death is not a free-text field; it ranks after all of them.
DATE_OF_DEATH_RANK = len(DECEASED_SEARCH_FIELDS)


def _starts_at_token_boundary(text: str, query: str) -> bool:
    """Return True if any occurrence of query in text begins a word."""
    start = text.find(query)
    while start != -1:
        if start == 0 or not text[start - 1].isalnum():
            return True
        start = text.find(query, start + 1)
    return False


def field_match_strength(value: str | None, query: str) -> float | None:
    """Score one field value against a normalized query.

    Args:
        value: Raw field value (None or empty never matches).
        query: Normalized, non-empty query.

    Returns:
        Match strength, or None when the field does not contain the query.
    """
    text = normalize_text(value)
    if not text or query not in text:
        return None
    if text == query:
        return EXACT_MATCH_STRENGTH
    if _starts_at_token_boundary(text, query):
        return TOKEN_BOUNDARY_STRENGTH
    return SUBSTRING_STRENGTH


def _ensure_well_formed(record: SearchableRecord) -> None:
    missing = record.missing_required_field()
    if missing is not None:
        raise MalformedRecordException(record.kind.value, record.id or None, missing)


def match_record(
    record: SearchableRecord,
    query: str,
    fields: Collection[str] | None = None,
) -> RecordMatch | None:
    """Match a record against the query across its kind's searchable fields.

    Args:
        record: Candidate record.
        query: Normalized, non-empty query.
        fields: Optional subset of the kind's searchable fields to consider.
            Priority ranks stay those of the full field list.

    Raises:
        MalformedRecordException: If the record lacks a required field.

    Returns:
        RecordMatch with every matching field, or None when nothing matched.
    """
    _ensure_well_formed(record)
    matches: list[FieldMatch] = []
    for rank, field_name in enumerate(SEARCH_FIELDS[record.kind]):
        if fields is not None and field_name not in fields:
            continue
        strength = field_match_strength(getattr(record, field_name), query)
        if strength is not None:
            matches.append(FieldMatch(field_name, strength, rank))
    if not matches:
        return None
    return RecordMatch(record=record, field_matches=tuple(matches))


def match_date_of_death(record: SearchableRecord, day: date) -> RecordMatch | None:
    """Exact date_of_death lookup; only deceased records can match."""
    _ensure_well_formed(record)
    if not isinstance(record, DeceasedRecordEntity) or record.date_of_death != day:
        return None
    return RecordMatch(
        record=record,
        field_matches=(FieldMatch("date_of_death", EXACT_MATCH_STRENGTH, DATE_OF_DEATH_RANK),),
    )
