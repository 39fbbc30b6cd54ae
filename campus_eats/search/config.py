from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class SearchConfig:
    min_score: float = float(os.getenv("SEARCH_MIN_SCORE", "10"))
    limit: int = int(os.getenv("SEARCH_LIMIT", "10"))
    min_query_length: int = int(os.getenv("SEARCH_MIN_QUERY_LENGTH", "2"))
    prefilter_limit: int = int(os.getenv("SEARCH_PREFILTER_LIMIT", "100"))
    cache_ttl: float = float(os.getenv("SEARCH_CACHE_TTL", "300"))


DEFAULT_SEARCH_CONFIG = SearchConfig()
