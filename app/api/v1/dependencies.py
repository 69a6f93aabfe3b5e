"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the DB session, the resolved actor and the
search use case. Routes depend only on these dependencies, not on infra
directly.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.repositories import IRecordStore
from app.application.interfaces.services import ISearchAuditEmitter
from app.application.use_cases.search import SearchService
from app.core.config import get_settings
from app.domain.entities.actor import ActorContext
from app.infrastructure.persistence.database import get_db, get_session_factory
from app.infrastructure.persistence.repositories import RecordStoreRepository
from app.infrastructure.security.jwt import actor_from_claims, verify_token
from app.infrastructure.services import SearchAuditService

logger = logging.getLogger(__name__)


# ---- Actor (resolved from optional bearer token) ----

_http_bearer = HTTPBearer(auto_error=False)


async def get_actor_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> ActorContext:
    """Return the effective actor; anonymous or unverifiable callers are public."""
    if not credentials:
        return ActorContext.public()
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        logger.info("Bearer token rejected, searching as public: %s", e)
        return ActorContext.public()
    return actor_from_claims(payload)


# ---- Search ----


def get_record_store(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> IRecordStore:
    """Record store backed by the request's read session."""
    return RecordStoreRepository(db)


def get_audit_emitter() -> ISearchAuditEmitter:
    """Audit emitter writing through its own sessions."""
    return SearchAuditService(get_session_factory())


def get_search_service(
    record_store: Annotated[IRecordStore, Depends(get_record_store)],
    audit_emitter: Annotated[ISearchAuditEmitter, Depends(get_audit_emitter)],
) -> SearchService:
    """Search use case configured from settings (composition root)."""
    settings = get_settings()
    return SearchService(
        record_store=record_store,
        audit_emitter=audit_emitter,
        min_query_length=settings.search_min_query_length,
        max_results=settings.search_max_results,
        audit_excerpt_length=settings.search_audit_excerpt_length,
        store_timeout_seconds=settings.search_store_timeout_seconds,
        audit_timeout_seconds=settings.search_audit_timeout_seconds,
    )
