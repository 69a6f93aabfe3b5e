"""Domain exceptions for record search.

Defines domain-level exceptions independent of infrastructure concerns.
The presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class RecordSearchException(Exception):
    """Base exception for all record search errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, record_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the API exception handler."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationException(RecordSearchException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class StoreUnavailableException(RecordSearchException):
    """Raised when the record store read fails or times out.

    Surfaces to the caller as a failed search; never replaced by an
    empty result, which would be indistinguishable from "no matches".
    """

    def __init__(self, reason: str, kind: str | None = None) -> None:
        """Initialize with the underlying reason.

        Args:
            reason: Short description (e.g. 'timeout after 10s').
            kind: Optional record kind whose read failed.
        """
        details: dict[str, Any] = {"reason": reason}
        if kind:
            details["kind"] = kind
        super().__init__(
            "Search temporarily unavailable, try again",
            "STORE_UNAVAILABLE",
            details,
        )


class MalformedRecordException(RecordSearchException):
    """Raised when a stored record lacks a field required for matching or display.

    Handled per record: the record is skipped and counted, the search goes on.
    """

    def __init__(self, kind: str, record_id: str | None, missing_field: str) -> None:
        super().__init__(
            f"Malformed {kind} record {record_id or '<no id>'}: missing {missing_field}",
            "MALFORMED_RECORD",
            {"kind": kind, "record_id": record_id, "missing_field": missing_field},
        )


class AuditEmissionFailedException(RecordSearchException):
    """Raised by audit emitters; recovered locally by the search use case."""

    def __init__(self, action: str, reason: str) -> None:
        super().__init__(
            f"Failed to emit audit event: {action}",
            "AUDIT_EMISSION_FAILED",
            {"action": action, "reason": reason},
        )


class SqlNotConfiguredException(RecordSearchException):
    """Raised when an operation needs the SQL database but none is configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
