"""API request/response schemas (Pydantic)."""

from app.schemas.health import HealthResponse
from app.schemas.search import SearchResponse, SearchResultItemResponse

__all__ = [
    "HealthResponse",
    "SearchResponse",
    "SearchResultItemResponse",
]
