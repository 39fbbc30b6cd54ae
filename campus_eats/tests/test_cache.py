from __future__ import annotations

import pytest

from campus_eats.cache import TTLCache


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def test_cache_miss_then_hit():
    cache = TTLCache(ttl=60, clock=FakeClock())
    assert cache.get({"query": "pizza"}) is None
    cache.set({"query": "pizza"}, ["r01"])
    assert cache.get({"query": "pizza"}) == ["r01"]

    stats = cache.stats()
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    assert stats["hit_rate"] == 50.0


def test_cache_key_ignores_dict_order():
    cache = TTLCache(ttl=60, clock=FakeClock())
    cache.set({"query": "pizza", "limit": 10}, "value")
    assert cache.get({"limit": 10, "query": "pizza"}) == "value"


def test_cache_entry_expires_after_ttl():
    clock = FakeClock()
    cache = TTLCache(ttl=60, clock=clock)
    cache.set("k", "v")

    clock.advance(59)
    assert cache.get("k") == "v"

    clock.advance(1)
    assert cache.get("k") is None
    # Expired entry is evicted on read
    assert len(cache) == 0


def test_get_or_set_calls_factory_once():
    cache = TTLCache(ttl=60, clock=FakeClock())
    calls = []

    def factory():
        calls.append(1)
        return {"a": 1}

    assert cache.get_or_set("k", factory) == {"a": 1}
    assert cache.get_or_set("k", factory) == {"a": 1}
    assert len(calls) == 1


def test_get_or_set_does_not_cache_none():
    cache = TTLCache(ttl=60, clock=FakeClock())
    assert cache.get_or_set("missing", lambda: None) is None
    assert len(cache) == 0


def test_prune_drops_only_expired():
    clock = FakeClock()
    cache = TTLCache(ttl=60, clock=clock)
    cache.set("old", 1)
    clock.advance(30)
    cache.set("new", 2)
    clock.advance(40)

    assert cache.prune() == 1
    assert cache.get("new") == 2


def test_clear_resets_stats():
    cache = TTLCache(ttl=60, clock=FakeClock())
    cache.set("k", "v")
    cache.get("k")
    cache.get("other")
    cache.clear()
    assert cache.stats() == {"size": 0, "hits": 0, "misses": 0, "hit_rate": 0.0}


def test_ttl_must_be_positive():
    with pytest.raises(ValueError):
        TTLCache(ttl=0)
