"""Tests for the multi-entity matcher (field strengths, priority ranks, malformed records)."""

from datetime import date

import pytest

from app.application.services.record_matcher import (
    DECEASED_SEARCH_FIELDS,
    EXACT_MATCH_STRENGTH,
    INVESTIGATION_REPORT_SEARCH_FIELDS,
    SUBSTRING_STRENGTH,
    TOKEN_BOUNDARY_STRENGTH,
    DATE_OF_DEATH_RANK,
    FIELDS_BY_MODE,
    field_match_strength,
    match_date_of_death,
    match_record,
)
from app.domain.enums import SearchField
from app.domain.exceptions import MalformedRecordException


@pytest.mark.parametrize(
    ("value", "query", "expected"),
    [
        ("Jane Doe", "jane doe", EXACT_MATCH_STRENGTH),
        ("  JANE   doe ", "jane doe", EXACT_MATCH_STRENGTH),
        ("Jane Doe", "doe", TOKEN_BOUNDARY_STRENGTH),
        ("Jane Doe", "jane", TOKEN_BOUNDARY_STRENGTH),
        ("red-jacket", "jacket", TOKEN_BOUNDARY_STRENGTH),
        ("eagle tattoo", "att", SUBSTRING_STRENGTH),
        ("Jane Doe", "smith", None),
        (None, "doe", None),
        ("", "doe", None),
    ],
)
def test_field_match_strength(value: str | None, query: str, expected: float | None) -> None:
    assert field_match_strength(value, query) == expected


def test_field_match_strength_uses_any_token_boundary_occurrence() -> None:
    """A later occurrence at a word start wins over an earlier mid-word one."""
    assert field_match_strength("Adoe Doe", "doe") == TOKEN_BOUNDARY_STRENGTH


def test_search_field_priority_order() -> None:
    assert DECEASED_SEARCH_FIELDS[0] == "full_name"
    assert DECEASED_SEARCH_FIELDS[-1] == "condition_of_body"
    assert INVESTIGATION_REPORT_SEARCH_FIELDS == (
        "jurisdiction",
        "circumstances_of_discovery",
        "evidence_collected",
        "officer_notes",
    )


def test_match_record_collects_every_matching_field(make_deceased) -> None:
    record = make_deceased(
        "Red Smith",
        clothing_description="red jacket",
        personal_effects="keys",
    )
    match = match_record(record, "red")
    assert match is not None
    assert [(m.field_name, m.strength, m.priority_rank) for m in match.field_matches] == [
        ("full_name", TOKEN_BOUNDARY_STRENGTH, 0),
        ("clothing_description", TOKEN_BOUNDARY_STRENGTH, 3),
    ]
    assert match.best_priority_rank == 0


def test_match_record_returns_none_without_matching_field(make_deceased) -> None:
    assert match_record(make_deceased("Jane Doe", location_found="Thika Road"), "nairobi") is None


def test_match_record_report_fields(make_report) -> None:
    report = make_report(jurisdiction="Kampala Central", officer_notes="seen in kampala")
    match = match_record(report, "kampala")
    assert match is not None
    assert match.matched_fields == ("jurisdiction", "officer_notes")


def test_match_record_ignores_case_id(make_report) -> None:
    """case_id is display-only, not a searchable field."""
    assert match_record(make_report("KMP-77", jurisdiction="Jinja"), "kmp-77") is None


@pytest.mark.parametrize("full_name", [None, "", "   "])
def test_match_record_missing_name_is_malformed(make_deceased, full_name) -> None:
    record = make_deceased(full_name, location_found="Thika Road")
    with pytest.raises(MalformedRecordException) as exc_info:
        match_record(record, "thika")
    assert exc_info.value.details["missing_field"] == "full_name"
    assert exc_info.value.details["record_id"] == record.id


def test_match_record_report_without_case_id_is_malformed(make_report) -> None:
    with pytest.raises(MalformedRecordException) as exc_info:
        match_record(make_report("", jurisdiction="Jinja"), "jinja")
    assert exc_info.value.details["kind"] == "investigation_report"


def test_match_record_restricted_to_location_keeps_priority_rank(make_deceased) -> None:
    record = make_deceased("Thika Mwangi", location_found="Thika Road")
    match = match_record(record, "thika", FIELDS_BY_MODE[SearchField.LOCATION])
    assert match is not None
    assert [(m.field_name, m.priority_rank) for m in match.field_matches] == [
        ("location_found", 1)
    ]


def test_name_mode_ignores_other_fields(make_deceased) -> None:
    record = make_deceased("Jane Doe", location_found="Kampala")
    assert match_record(record, "kampala", FIELDS_BY_MODE[SearchField.NAME]) is None


def test_name_mode_never_matches_reports(make_report) -> None:
    report = make_report(jurisdiction="Jane Doe County")
    assert match_record(report, "jane", FIELDS_BY_MODE[SearchField.NAME]) is None


def test_match_date_of_death_exact_day(make_deceased, make_report) -> None:
    record = make_deceased("Jane Doe", date_of_death=date(2026, 2, 14))
    match = match_date_of_death(record, date(2026, 2, 14))
    assert match is not None
    assert [(m.field_name, m.strength, m.priority_rank) for m in match.field_matches] == [
        ("date_of_death", EXACT_MATCH_STRENGTH, DATE_OF_DEATH_RANK)
    ]
    assert match_date_of_death(record, date(2026, 2, 15)) is None
    assert match_date_of_death(make_deceased("No Date"), date(2026, 2, 14)) is None
    assert match_date_of_death(make_report(), date(2026, 2, 14)) is None


def test_match_date_of_death_rejects_malformed(make_deceased) -> None:
    with pytest.raises(MalformedRecordException):
        match_date_of_death(make_deceased(None, date_of_death=date(2026, 2, 14)), date(2026, 2, 14))
