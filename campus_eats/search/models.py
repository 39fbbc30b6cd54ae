from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..restaurants.models import RestaurantOut


class CandidateRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(..., min_length=1)
    address: str | None = None
    popularity_score: float | None = Field(default=None, ge=0.0, le=5.0)
    popularity_count: int | None = Field(default=None, ge=0)


class ScoredResult(BaseModel):
    record: CandidateRecord
    score: float = Field(..., ge=0.0)


class SearchResultItem(BaseModel):
    restaurant: RestaurantOut
    score: float


class SearchResponse(BaseModel):
    query: str
    results: list[SearchResultItem]
    total_candidates: int
