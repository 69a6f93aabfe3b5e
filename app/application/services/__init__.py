"""Application services: pure search steps (normalize, match, rank, filter)."""

from app.application.services.query_normalizer import (
    is_searchable,
    normalize_query,
    normalize_text,
    tokenize,
)
from app.application.services.record_matcher import (
    FIELDS_BY_MODE,
    SEARCH_FIELDS,
    field_match_strength,
    match_date_of_death,
    match_record,
)
from app.application.services.relevance_ranker import rank_matches, relevance_score
from app.application.services.visibility_filter import (
    filter_visible,
    is_visible,
    to_result_item,
)

__all__ = [
    "FIELDS_BY_MODE",
    "SEARCH_FIELDS",
    "field_match_strength",
    "filter_visible",
    "is_searchable",
    "is_visible",
    "match_date_of_death",
    "match_record",
    "normalize_query",
    "normalize_text",
    "rank_matches",
    "relevance_score",
    "to_result_item",
    "tokenize",
]
