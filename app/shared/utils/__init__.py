"""Shared helpers: UTC timestamps, CUID ids, output sanitization."""

from app.shared.utils.datetime import ensure_utc, utc_isoformat, utc_now
from app.shared.utils.generators import generate_cuid
from app.shared.utils.sanitization import InputSanitizer, sanitize_text

__all__ = [
    "InputSanitizer",
    "ensure_utc",
    "generate_cuid",
    "sanitize_text",
    "utc_isoformat",
    "utc_now",
]
