from __future__ import annotations

import logging

import pandas as pd

from ..cache import TTLCache
from ..search.models import CandidateRecord
from .config import DEFAULT_DATA_CONFIG
from .data_store import (
    get_categories,
    get_ratings,
    get_restaurant_categories,
    get_restaurants,
    register_dependent_cache,
)
from .models import CategoryOut, RestaurantDetail, RestaurantOut

logger = logging.getLogger(__name__)

category_cache = TTLCache(ttl=DEFAULT_DATA_CONFIG.category_cache_ttl)
detail_cache = TTLCache(ttl=DEFAULT_DATA_CONFIG.detail_cache_ttl)
register_dependent_cache(category_cache)
register_dependent_cache(detail_cache)


def _optional(value, cast):
    return cast(value) if pd.notna(value) else None


def row_to_restaurant(row: pd.Series) -> RestaurantOut:
    return RestaurantOut(
        id=str(row["id"]),
        name=row["name"],
        address=_optional(row.get("address"), str),
        latitude=float(row["latitude"]),
        longitude=float(row["longitude"]),
        google_place_id=_optional(row.get("google_place_id"), str),
        google_rating=_optional(row.get("google_rating"), float),
        google_ratings_count=_optional(row.get("google_ratings_count"), int),
        google_price_level=_optional(row.get("google_price_level"), int),
    )


def row_to_candidate(row: pd.Series) -> CandidateRecord:
    """Map a catalog row onto the ranking engine's input shape."""
    return CandidateRecord(
        id=str(row["id"]),
        name=row["name"],
        address=_optional(row.get("address"), str),
        popularity_score=_optional(row.get("google_rating"), float),
        popularity_count=_optional(row.get("google_ratings_count"), int),
    )


def list_categories() -> list[CategoryOut]:
    df = get_categories().sort_values("name", kind="stable")
    return [
        CategoryOut(id=row["id"], slug=row["slug"], name=row["name"])
        for _, row in df.iterrows()
    ]


def get_category_lookup(cache: TTLCache = category_cache) -> dict[str, CategoryOut]:
    """Return ``{category_id: CategoryOut}``, memoized in ``cache``."""
    return cache.get_or_set(
        "category_lookup",
        lambda: {c.id: c for c in list_categories()},
    )


def list_restaurants(category: str | None = None) -> list[RestaurantOut]:
    """Return every restaurant, or only those tagged with the ``category`` slug."""
    df = get_restaurants()

    if category:
        slug = category.strip().lower()
        categories = get_categories()
        category_ids = categories.loc[categories["slug"] == slug, "id"]
        if category_ids.empty:
            logger.info("Unknown category slug %r", category)
            return []
        links = get_restaurant_categories()
        restaurant_ids = links.loc[links["category_id"].isin(category_ids), "restaurant_id"]
        df = df[df["id"].isin(restaurant_ids)]

    return [row_to_restaurant(row) for _, row in df.iterrows()]


def _build_detail(restaurant_id: str) -> RestaurantDetail | None:
    df = get_restaurants()
    match = df[df["id"] == restaurant_id]
    if match.empty:
        return None
    restaurant = row_to_restaurant(match.iloc[0])

    links = get_restaurant_categories()
    category_ids = links.loc[links["restaurant_id"] == restaurant_id, "category_id"].tolist()
    lookup = get_category_lookup()
    categories = [lookup[cid] for cid in category_ids if cid in lookup]

    ratings = get_ratings()
    scores = ratings.loc[ratings["restaurant_id"] == restaurant_id, "score"]
    average_rating = float(scores.mean()) if not scores.empty else None

    return RestaurantDetail(
        restaurant=restaurant,
        categories=categories,
        average_rating=average_rating,
        total_ratings=len(scores),
    )


def get_restaurant_detail(
    restaurant_id: str,
    cache: TTLCache = detail_cache,
) -> RestaurantDetail | None:
    """Return the restaurant with its categories and user ratings summary.

    Returns ``None`` when no restaurant has ``restaurant_id``. Callers get a
    copy, so mutating it leaves the cached detail intact.
    """
    detail = cache.get_or_set(
        {"restaurant_id": restaurant_id},
        lambda: _build_detail(restaurant_id),
    )
    return detail.model_copy(deep=True) if detail is not None else None
