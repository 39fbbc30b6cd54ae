from __future__ import annotations

import logging
import time

from ..cache import TTLCache
from ..restaurants.catalog import row_to_candidate, row_to_restaurant
from ..restaurants.data_store import get_restaurants, register_dependent_cache
from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .models import CandidateRecord, SearchResponse, SearchResultItem
from .ranking import normalize_query, rank_scored

logger = logging.getLogger(__name__)

search_cache = TTLCache(ttl=DEFAULT_SEARCH_CONFIG.cache_ttl)
register_dependent_cache(search_cache)


def prefilter_candidates(
    normalized_query: str,
    limit: int = DEFAULT_SEARCH_CONFIG.prefilter_limit,
) -> list[CandidateRecord]:
    """Return catalog rows whose name or address contains the query, in catalog order."""
    df = get_restaurants()
    mask = df["name_lower"].str.contains(normalized_query, regex=False, na=False) | df[
        "address_lower"
    ].str.contains(normalized_query, regex=False, na=False)
    return [row_to_candidate(row) for _, row in df.loc[mask].head(limit).iterrows()]


def search_restaurants(
    query: str,
    limit: int | None = None,
    min_score: float | None = None,
    config: SearchConfig | None = None,
    cache: TTLCache = search_cache,
) -> SearchResponse:
    """
    Prefilter the catalog for ``query`` and rank the candidates.

    ``limit`` and ``min_score`` fall back to ``config`` (``DEFAULT_SEARCH_CONFIG``
    when omitted). Every call gets its own copy of the response, cached or not.
    """
    start_time = time.time()
    config = config or DEFAULT_SEARCH_CONFIG

    normalized = normalize_query(query)
    limit = config.limit if limit is None else limit
    min_score = float(config.min_score if min_score is None else min_score)

    # Too short to rank meaningfully
    if len(normalized) < config.min_query_length:
        return SearchResponse(query=normalized, results=[], total_candidates=0)

    # --- Cache check ---
    cache_key = {"query": normalized, "limit": limit, "min_score": min_score}
    cached = cache.get(cache_key)
    if cached is not None:
        logger.debug("Search cache hit for %r", normalized)
        return cached.model_copy(deep=True)

    candidates = prefilter_candidates(normalized, limit=config.prefilter_limit)
    ranked = rank_scored(normalized, candidates, min_score=min_score, limit=limit)

    df = get_restaurants()
    ranked_ids = [r.record.id for r in ranked]
    rows_by_id = {str(row["id"]): row for _, row in df[df["id"].isin(ranked_ids)].iterrows()}
    items = [
        SearchResultItem(
            restaurant=row_to_restaurant(rows_by_id[r.record.id]),
            score=round(r.score, 4),
        )
        for r in ranked
    ]

    response = SearchResponse(
        query=normalized,
        results=items,
        total_candidates=len(candidates),
    )
    cache.set(cache_key, response)

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    logger.debug(
        "Search %r: %d candidates, %d results in %.1f ms",
        normalized, len(candidates), len(items), elapsed_ms,
    )
    return response.model_copy(deep=True)
