from __future__ import annotations

import logging

import pandas as pd

from ..cache import TTLCache
from .config import DEFAULT_DATA_CONFIG, DataConfig

logger = logging.getLogger(__name__)

_config: DataConfig = DEFAULT_DATA_CONFIG
_restaurants: pd.DataFrame | None = None
_categories: pd.DataFrame | None = None
_restaurant_categories: pd.DataFrame | None = None
_ratings: pd.DataFrame | None = None
_dependent_caches: list[TTLCache] = []


def _load_restaurants() -> pd.DataFrame:
    df = pd.read_csv(
        _config.restaurants_path,
        dtype={"id": str, "name": str, "address": str, "google_place_id": str},
    )

    # Lowercase name and address for case-insensitive prefiltering
    df["name_lower"] = df["name"].fillna("").str.lower()
    df["address_lower"] = df["address"].fillna("").str.lower()

    logger.debug("Loaded %d restaurants from %s", len(df), _config.restaurants_path)
    return df


def get_restaurants() -> pd.DataFrame:
    """Return the in-memory restaurant DataFrame, loading it on first call."""
    global _restaurants
    if _restaurants is None:
        _restaurants = _load_restaurants()
    return _restaurants


def get_categories() -> pd.DataFrame:
    global _categories
    if _categories is None:
        _categories = pd.read_csv(_config.categories_path, dtype=str)
    return _categories


def get_restaurant_categories() -> pd.DataFrame:
    global _restaurant_categories
    if _restaurant_categories is None:
        _restaurant_categories = pd.read_csv(_config.restaurant_categories_path, dtype=str)
    return _restaurant_categories


def get_ratings() -> pd.DataFrame:
    global _ratings
    if _ratings is None:
        _ratings = pd.read_csv(
            _config.ratings_path,
            dtype={"id": str, "restaurant_id": str, "user_id": str},
        )
    return _ratings


def register_dependent_cache(cache: TTLCache) -> None:
    """Clear ``cache`` whenever the catalog is reloaded."""
    if cache not in _dependent_caches:
        _dependent_caches.append(cache)


def reload(config: DataConfig | None = None) -> None:
    """Drop the loaded tables so the next access re-reads them.

    Passing ``config`` also switches the data directory. Caches registered
    with :func:`register_dependent_cache` are cleared as well.
    """
    global _config, _restaurants, _categories, _restaurant_categories, _ratings
    if config is not None:
        _config = config
    _restaurants = None
    _categories = None
    _restaurant_categories = None
    _ratings = None
    for cache in _dependent_caches:
        cache.clear()
