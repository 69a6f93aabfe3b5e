"""Shared utilities: telemetry and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.utils import (
    InputSanitizer,
    ensure_utc,
    generate_cuid,
    sanitize_text,
    utc_now,
)

__all__ = [
    "InputSanitizer",
    "ensure_utc",
    "generate_cuid",
    "sanitize_text",
    "utc_now",
]
