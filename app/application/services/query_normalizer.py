"""Query normalization for record search.

Raw user input is trimmed, lower-cased, and has internal whitespace
collapsed. Input with no letter or digit normalizes to the empty string.
Field values are normalized the same way before matching so that both
sides compare on equal terms.
"""

import re

DEFAULT_MIN_QUERY_LENGTH = 2

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(value: str | None) -> str:
    """Lower-case, trim, and collapse whitespace. None becomes ''."""
    if not value:
        return ""
    return _WHITESPACE_RE.sub(" ", value).strip().lower()


def normalize_query(raw: str | None) -> str:
    """Normalize a raw search string.

    Args:
        raw: Arbitrary user-supplied string (may be empty or None).

    Returns:
        Normalized query, or '' when the input holds only whitespace
        and punctuation.
    """
    normalized = normalize_text(raw)
    if not any(ch.isalnum() for ch in normalized):
        return ""
    return normalized


def tokenize(normalized: str) -> list[str]:
    """Split a normalized query into its whitespace-separated terms."""
    return normalized.split() if normalized else []


def is_searchable(
    normalized: str, min_length: int = DEFAULT_MIN_QUERY_LENGTH
) -> bool:
    """Return True if the normalized query meets the minimum length floor."""
    return len(normalized) >= min_length
