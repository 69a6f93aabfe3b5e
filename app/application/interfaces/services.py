"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.audit_log import SearchAuditEvent


# Audit emitter interface
class ISearchAuditEmitter(Protocol):
    """Protocol for the external audit collaborator.

    Failures may be raised freely; the search use case treats audit as
    best-effort and never lets them reach the caller.
    """

    async def emit_search_performed(self, event: SearchAuditEvent) -> None:
        """Record one search_performed event."""
