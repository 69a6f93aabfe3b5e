"""Search API: universal search across deceased records and investigation reports."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import get_actor_context, get_search_service
from app.application.dtos.search import SearchResultItem
from app.application.use_cases.search import SearchService
from app.core.limiter import limit_search
from app.domain.entities.actor import ActorContext
from app.domain.enums import SearchField, SearchScope
from app.schemas.search import SearchResponse, SearchResultItemResponse
from app.shared.utils.sanitization import sanitize_text

router = APIRouter()

REFINE_MESSAGE = (
    "Showing first {count} results. "
    "Please refine your search for more specific results."
)


def _to_response_item(item: SearchResultItem) -> SearchResultItemResponse:
    """Map a result to the API schema, stripping markup from stored free text."""
    return SearchResultItemResponse(
        kind=item.kind.value,
        id=item.record_id,
        display_name=sanitize_text(item.display_name),
        display_summary=sanitize_text(item.display_summary),
        relevance_score=item.relevance_score,
        is_public=item.is_public,
        created_at=item.created_at,
    )


@router.get(
    "",
    response_model=SearchResponse,
    responses={
        400: {"description": "q is not a date while field=date"},
        503: {"description": "Record store unavailable; retry later"},
    },
)
@limit_search
async def search(
    request: Request,
    actor: Annotated[ActorContext, Depends(get_actor_context)],
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    q: str = Query("", max_length=500, description="Free-text query"),
    scope: SearchScope = Query(SearchScope.ALL, description="Record kinds to search"),
    field: SearchField = Query(
        SearchField.ANY,
        description="Fields to match: any, name, location, or date (q as YYYY-MM-DD)",
    ),
) -> SearchResponse:
    """Search records visible to the caller, most relevant first.

    Queries shorter than two characters (after trimming) return no results.
    With field=date, q must be an ISO date and is matched against date of death;
    anything else is a 400.
    """
    outcome = await search_svc.search(q, actor, scope, field)
    results = [_to_response_item(item) for item in outcome.results]
    return SearchResponse(
        results=results,
        truncated=outcome.truncated,
        count=len(results),
        message=REFINE_MESSAGE.format(count=len(results)) if outcome.truncated else None,
    )
