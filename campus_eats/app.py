from __future__ import annotations

from fastapi import FastAPI, HTTPException, Query, Response

from .restaurants.catalog import (
    category_cache,
    detail_cache,
    get_restaurant_detail,
    list_categories,
    list_restaurants,
)
from .restaurants.models import CategoryOut, RestaurantDetail, RestaurantOut
from .search.models import SearchResponse
from .search.service import search_cache, search_restaurants

app = FastAPI(title="Campus Eats API", version="1.0.0")

_DETAIL_CACHE_CONTROL = "public, s-maxage=300, stale-while-revalidate=600"


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/search", response_model=SearchResponse)
def search(
    q: str = Query(..., max_length=200, description="Free-text restaurant query"),
    limit: int | None = Query(default=None, ge=1, le=50),
    min_score: float | None = Query(default=None, ge=0.0),
) -> SearchResponse:
    return search_restaurants(q, limit=limit, min_score=min_score)


# ── Catalog endpoints ────────────────────────────────────────────────────


@app.get("/categories", response_model=list[CategoryOut])
def categories() -> list[CategoryOut]:
    return list_categories()


@app.get("/restaurants", response_model=list[RestaurantOut])
def restaurants(category: str | None = None) -> list[RestaurantOut]:
    return list_restaurants(category)


@app.get("/restaurants/{restaurant_id}", response_model=RestaurantDetail)
def restaurant_detail(restaurant_id: str, response: Response) -> RestaurantDetail:
    detail = get_restaurant_detail(restaurant_id)
    if detail is None:
        raise HTTPException(status_code=404, detail="Restaurant not found")
    response.headers["Cache-Control"] = _DETAIL_CACHE_CONTROL
    return detail


# ── Diagnostics ──────────────────────────────────────────────────────────


@app.get("/cache/stats")
def cache_stats() -> dict:
    return {
        "search": search_cache.stats(),
        "details": detail_cache.stats(),
        "categories": category_cache.stats(),
    }
