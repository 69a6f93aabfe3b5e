"""Search API schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class SearchResultItemResponse(BaseModel):
    """Single search hit (deceased record or investigation report)."""

    kind: Literal["deceased", "investigation_report"] = Field(
        ..., description="deceased | investigation_report"
    )
    id: str
    display_name: str
    display_summary: str
    relevance_score: float = Field(..., ge=0.0, le=1.0)
    is_public: bool
    created_at: datetime


class SearchResponse(BaseModel):
    """Universal search response, ordered by relevance."""

    results: list[SearchResultItemResponse]
    truncated: bool = Field(
        default=False, description="True when the result cap was reached"
    )
    count: int = Field(default=0, description="Number of results returned")
    message: str | None = Field(
        default=None, description="Refinement hint when truncated"
    )
