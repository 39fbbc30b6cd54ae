from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class DataConfig:
    data_dir: Path = Path(os.getenv("CAMPUS_EATS_DATA_DIR", str(_BUNDLED_DATA_DIR)))
    restaurants_filename: str = "restaurants.csv"
    categories_filename: str = "categories.csv"
    restaurant_categories_filename: str = "restaurant_categories.csv"
    ratings_filename: str = "ratings.csv"
    category_cache_ttl: float = float(os.getenv("CATEGORY_CACHE_TTL", "3600"))
    detail_cache_ttl: float = float(os.getenv("DETAIL_CACHE_TTL", "300"))

    @property
    def restaurants_path(self) -> Path:
        return self.data_dir / self.restaurants_filename

    @property
    def categories_path(self) -> Path:
        return self.data_dir / self.categories_filename

    @property
    def restaurant_categories_path(self) -> Path:
        return self.data_dir / self.restaurant_categories_filename

    @property
    def ratings_path(self) -> Path:
        return self.data_dir / self.ratings_filename


DEFAULT_DATA_CONFIG = DataConfig()
