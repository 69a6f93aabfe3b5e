"""Universal search use case: normalize, match, rank, filter, audit.

Stateless per call. The only suspension points are the record-store reads
and the audit emission, each bounded by its own timeout.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import date, datetime
from functools import partial
from typing import TYPE_CHECKING, TypeVar

from app.application.dtos.audit_log import SearchAuditEvent
from app.application.dtos.search import RecordMatch, SearchOutcome
from app.application.services.query_normalizer import (
    DEFAULT_MIN_QUERY_LENGTH,
    is_searchable,
    normalize_query,
)
from app.application.services.record_matcher import (
    FIELDS_BY_MODE,
    match_date_of_death,
    match_record,
)
from app.application.services.relevance_ranker import rank_matches
from app.application.services.visibility_filter import (
    DEFAULT_MAX_RESULTS,
    filter_visible,
    to_result_item,
)
from app.domain.entities.actor import ActorContext
from app.domain.entities.records import SearchableRecord
from app.domain.enums import RecordKind, SearchField, SearchScope
from app.domain.exceptions import (
    AuditEmissionFailedException,
    MalformedRecordException,
    StoreUnavailableException,
    ValidationException,
)
from app.shared.telemetry.tracing import add_span_attributes, traced
from app.shared.utils.datetime import utc_now

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IRecordStore
    from app.application.interfaces.services import ISearchAuditEmitter

logger = logging.getLogger(__name__)

T = TypeVar("T")

Matcher = Callable[[SearchableRecord], RecordMatch | None]

DEFAULT_AUDIT_EXCERPT_LENGTH = 50
DEFAULT_STORE_TIMEOUT_SECONDS = 10.0
DEFAULT_AUDIT_TIMEOUT_SECONDS = 2.0


def parse_date_query(query: str) -> date:
    """Parse a normalized date-mode query (YYYY-MM-DD).

    Raises:
        ValidationException: If the query is not an ISO calendar date.
    """
    try:
        return date.fromisoformat(query)
    except ValueError as exc:
        raise ValidationException(
            "Date search expects q as YYYY-MM-DD", field="q"
        ) from exc


class SearchService:
    """Universal search across deceased records and investigation reports."""

    def __init__(
        self,
        record_store: "IRecordStore",
        audit_emitter: "ISearchAuditEmitter",
        *,
        min_query_length: int = DEFAULT_MIN_QUERY_LENGTH,
        max_results: int = DEFAULT_MAX_RESULTS,
        audit_excerpt_length: int = DEFAULT_AUDIT_EXCERPT_LENGTH,
        store_timeout_seconds: float = DEFAULT_STORE_TIMEOUT_SECONDS,
        audit_timeout_seconds: float = DEFAULT_AUDIT_TIMEOUT_SECONDS,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.record_store = record_store
        self.audit_emitter = audit_emitter
        self.min_query_length = min_query_length
        self.max_results = max_results
        self.audit_excerpt_length = audit_excerpt_length
        self.store_timeout_seconds = store_timeout_seconds
        self.audit_timeout_seconds = audit_timeout_seconds
        self._clock = clock

    @traced("search.execute")
    async def search(
        self,
        raw_query: str | None,
        actor: ActorContext,
        scope: SearchScope = SearchScope.ALL,
        field: SearchField = SearchField.ANY,
    ) -> SearchOutcome:
        """Run one search for the given actor.

        Queries shorter than the minimum after normalization return an empty
        outcome without reading the store or emitting an audit event.

        Args:
            raw_query: User-supplied text (may be empty).
            actor: Resolved requester identity.
            scope: Record kinds to search.
            field: Fields to match. Single-field modes only read deceased
                records; ``date`` expects an ISO date in raw_query.

        Returns:
            SearchOutcome with at most max_results items; truncated is True
            when the cap was reached.

        Raises:
            ValidationException: If field is ``date`` and the query is not a date.
            StoreUnavailableException: If a record-store read fails or times out.
        """
        query = normalize_query(raw_query)
        if not is_searchable(query, self.min_query_length):
            return SearchOutcome(results=[], truncated=False)

        if field is SearchField.DATE:
            day = parse_date_query(query)
            candidates = await self._load_by_date(day, scope)
            matcher: Matcher = partial(match_date_of_death, day=day)
        else:
            candidates = await self._load_candidates(query, actor, scope, field)
            matcher = partial(match_record, query=query, fields=FIELDS_BY_MODE.get(field))

        matches, malformed = self._match(candidates, matcher)
        ranked = rank_matches(matches)
        visible = filter_visible(ranked, actor, self.max_results)
        results = [to_result_item(item, actor) for item in visible]
        truncated = len(results) >= self.max_results

        add_span_attributes(
            **{
                "search.actor_role": actor.role.value,
                "search.scope": scope.value,
                "search.field": field.value,
                "search.candidates": len(candidates),
                "search.malformed_records": malformed,
                "search.result_count": len(results),
                "search.truncated": truncated,
            }
        )
        await self._emit_audit(query, actor, scope, len(results))
        return SearchOutcome(results=results, truncated=truncated)

    async def _load_candidates(
        self,
        query: str,
        actor: ActorContext,
        scope: SearchScope,
        field: SearchField,
    ) -> list[SearchableRecord]:
        candidates: list[SearchableRecord] = []
        if scope.includes(RecordKind.DECEASED):
            candidates.extend(
                await self._read(
                    RecordKind.DECEASED,
                    self.record_store.list_deceased_records(query),
                )
            )
        # Public actors never see reports; skip the read entirely.
        if (
            scope.includes(RecordKind.INVESTIGATION_REPORT)
            and field.includes(RecordKind.INVESTIGATION_REPORT)
            and actor.role.is_professional
        ):
            candidates.extend(
                await self._read(
                    RecordKind.INVESTIGATION_REPORT,
                    self.record_store.list_investigation_reports(query),
                )
            )
        return candidates

    async def _load_by_date(self, day: date, scope: SearchScope) -> list[SearchableRecord]:
        if not scope.includes(RecordKind.DECEASED):
            return []
        return list(
            await self._read(
                RecordKind.DECEASED,
                self.record_store.list_deceased_records_by_date_of_death(day),
            )
        )

    async def _read(self, kind: RecordKind, read: Awaitable[list[T]]) -> list[T]:
        """Await one store read under the store timeout."""
        try:
            return await asyncio.wait_for(read, timeout=self.store_timeout_seconds)
        except StoreUnavailableException:
            raise
        except TimeoutError as exc:
            logger.error(
                "Record store read timed out after %ss (kind=%s)",
                self.store_timeout_seconds,
                kind.value,
            )
            raise StoreUnavailableException(
                f"timeout after {self.store_timeout_seconds}s", kind.value
            ) from exc
        except OSError as exc:
            logger.error("Record store read failed (kind=%s): %s", kind.value, exc)
            raise StoreUnavailableException(str(exc), kind.value) from exc

    def _match(
        self, candidates: list[SearchableRecord], matcher: Matcher
    ) -> tuple[list[RecordMatch], int]:
        """Return matches and the number of malformed records skipped."""
        matches: list[RecordMatch] = []
        malformed = 0
        for record in candidates:
            try:
                match = matcher(record)
            except MalformedRecordException as exc:
                malformed += 1
                logger.warning("Skipping record: %s", exc.message)
                continue
            if match is not None:
                matches.append(match)
        if malformed:
            logger.warning("Search skipped %d malformed record(s)", malformed)
        return matches, malformed

    async def _emit_audit(
        self, query: str, actor: ActorContext, scope: SearchScope, result_count: int
    ) -> None:
        """Emit the search_performed event under the audit timeout.

        Failures and timeouts are logged, never raised.
        """
        event = SearchAuditEvent(
            actor_role=actor.role.value,
            query_excerpt=query[: self.audit_excerpt_length],
            result_count=result_count,
            timestamp=self._clock(),
            actor_id=actor.id,
            scope=scope,
        )
        try:
            await asyncio.wait_for(
                self.audit_emitter.emit_search_performed(event),
                timeout=self.audit_timeout_seconds,
            )
        except AuditEmissionFailedException as exc:
            logger.warning("Audit emission failed: %s (%s)", exc.message, exc.details)
        except TimeoutError:
            logger.warning(
                "Audit emission failed: %s timed out after %ss",
                event.action,
                self.audit_timeout_seconds,
            )
        except Exception as exc:
            logger.warning("Audit emission failed: %s: %s", event.action, exc, exc_info=True)
