from __future__ import annotations

import threading
from typing import Any

from .models import SearchResponse
from .service import search_restaurants


class SearchSession:
    """
    Tracks search generations for one client so stale results can be dropped.

    Every call to :meth:`begin` supersedes the searches started before it.
    Debouncing keystrokes stays with the client; this only answers whether a
    finished search is still the latest one.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._generation = 0

    def begin(self) -> int:
        with self._lock:
            self._generation += 1
            return self._generation

    def is_current(self, token: int) -> bool:
        with self._lock:
            return token == self._generation

    def search(self, query: str, **kwargs: Any) -> SearchResponse | None:
        """Run a search, returning ``None`` if a newer one began meanwhile."""
        token = self.begin()
        response = search_restaurants(query, **kwargs)
        if not self.is_current(token):
            return None
        return response
