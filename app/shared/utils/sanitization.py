"""Output sanitization for free text typed by staff and shown to searchers."""

from typing import ClassVar

import nh3


class InputSanitizer:
    """
    Strip markup from free-text record fields before they leave the API.

    Records are entered through forms by many staff members; summaries
    are rendered by browser clients, so no HTML survives.
    """

    ALLOWED_TAGS: ClassVar[set[str]] = set()
    ALLOWED_ATTRIBUTES: ClassVar[dict[str, set[str]]] = {}

    @classmethod
    def sanitize_html(cls, value: str) -> str:
        """Remove all HTML tags with nh3 (strict by default).

        Args:
            value: Raw string that may contain HTML.

        Returns:
            Sanitized string safe for HTML display.
        """
        if not value:
            return value
        return nh3.clean(
            value,
            tags=cls.ALLOWED_TAGS,
            attributes=cls.ALLOWED_ATTRIBUTES,
        )


def sanitize_text(value: str) -> str:
    """Shorthand for InputSanitizer.sanitize_html."""
    return InputSanitizer.sanitize_html(value)
