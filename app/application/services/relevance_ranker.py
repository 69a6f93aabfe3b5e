"""Relevance ranking: collapse per-field matches into one score and order records."""

from __future__ import annotations

from collections.abc import Iterable

from app.application.dtos.search import RankedRecord, RecordMatch

ADDITIONAL_FIELD_BONUS = 0.05
MAX_SCORE = 1.0


def relevance_score(match: RecordMatch) -> float:
    """Return max field strength plus a bonus per extra matching field, capped at 1.0.

    Rounded to 4 places so that equal scores compare equal regardless of
    float accumulation order.
    """
    strengths = [m.strength for m in match.field_matches]
    score = max(strengths) + ADDITIONAL_FIELD_BONUS * (len(strengths) - 1)
    return round(min(score, MAX_SCORE), 4)


def _sort_key(ranked: RankedRecord) -> tuple:
    record = ranked.record
    return (
        -ranked.score,
        ranked.match.best_priority_rank,
        -record.created_at.timestamp(),
        record.kind.value,
        record.id,
    )


def rank_matches(matches: Iterable[RecordMatch]) -> list[RankedRecord]:
    """Score and order matches from every record kind into one sequence.

    Order: score descending, then best (earliest) matching field priority,
    then newest created_at first. Kind and id close the key so identical
    inputs always produce identical output.
    """
    ranked = [RankedRecord(match=m, score=relevance_score(m)) for m in matches]
    ranked.sort(key=_sort_key)
    return ranked
