from __future__ import annotations

import hashlib
import json
import time
from typing import Any, Callable


def _make_key(key: Any) -> str:
    normalized = json.dumps(key, sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


class TTLCache:
    """
    Process-local memoization with time-based expiry.

    Each entry is stored as ``{value, inserted_at}`` and checked against
    ``ttl`` on read. ``clock`` defaults to ``time.time`` and can be swapped
    for a fake in tests.
    """

    def __init__(self, ttl: float, clock: Callable[[], float] = time.time) -> None:
        if ttl <= 0:
            raise ValueError(f"ttl must be positive, got {ttl!r}")
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, dict[str, Any]] = {}
        self._hits = 0
        self._misses = 0

    def _is_fresh(self, entry: dict[str, Any]) -> bool:
        return self._clock() - entry["inserted_at"] < self.ttl

    def get(self, key: Any) -> Any | None:
        hashed = _make_key(key)
        entry = self._entries.get(hashed)
        if entry and self._is_fresh(entry):
            self._hits += 1
            return entry["value"]
        if entry:
            del self._entries[hashed]
        self._misses += 1
        return None

    def set(self, key: Any, value: Any) -> None:
        self._entries[_make_key(key)] = {"value": value, "inserted_at": self._clock()}

    def get_or_set(self, key: Any, factory: Callable[[], Any]) -> Any:
        """Return the cached value for ``key``, computing and storing it on a miss.

        ``None`` results from ``factory`` are not cached.
        """
        value = self.get(key)
        if value is not None:
            return value
        value = factory()
        if value is not None:
            self.set(key, value)
        return value

    def prune(self) -> int:
        """Drop every expired entry and return how many were removed."""
        expired = [k for k, e in self._entries.items() if not self._is_fresh(e)]
        for k in expired:
            del self._entries[k]
        return len(expired)

    def stats(self) -> dict:
        total = self._hits + self._misses
        return {
            "size": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(self._hits / total * 100, 1) if total > 0 else 0.0,
        }

    def clear(self) -> None:
        self._entries.clear()
        self._hits = 0
        self._misses = 0

    def __len__(self) -> int:
        return len(self._entries)
