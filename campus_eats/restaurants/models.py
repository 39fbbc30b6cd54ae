from __future__ import annotations

from pydantic import BaseModel


class RestaurantOut(BaseModel):
    id: str
    name: str
    address: str | None
    latitude: float
    longitude: float
    google_place_id: str | None = None
    google_rating: float | None = None
    google_ratings_count: int | None = None
    google_price_level: int | None = None


class CategoryOut(BaseModel):
    id: str
    slug: str
    name: str


class RestaurantDetail(BaseModel):
    restaurant: RestaurantOut
    categories: list[CategoryOut]
    average_rating: float | None
    total_ratings: int
