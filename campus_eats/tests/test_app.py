from __future__ import annotations

from fastapi.testclient import TestClient

from campus_eats.app import app

client = TestClient(app)


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_categories():
    resp = client.get("/categories")
    assert resp.status_code == 200
    assert [c["slug"] for c in resp.json()] == ["asian", "breakfast", "cafe", "dessert", "pizza", "pub"]


def test_restaurants_for_map():
    resp = client.get("/restaurants")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body) == 12
    assert {"latitude", "longitude"} <= set(body[0])


def test_restaurants_filtered_by_category():
    resp = client.get("/restaurants", params={"category": "cafe"})
    assert [r["id"] for r in resp.json()] == ["r08", "r11"]


def test_restaurants_unknown_category():
    resp = client.get("/restaurants", params={"category": "tacos"})
    assert resp.status_code == 200
    assert resp.json() == []


def test_restaurant_detail():
    resp = client.get("/restaurants/r02")
    assert resp.status_code == 200
    body = resp.json()
    assert body["restaurant"]["name"] == "Joe's Diner"
    assert body["categories"] == [{"id": "c4", "slug": "breakfast", "name": "Breakfast"}]
    assert body["average_rating"] == 5.0
    assert body["total_ratings"] == 1
    assert resp.headers["cache-control"] == "public, s-maxage=300, stale-while-revalidate=600"


def test_restaurant_detail_not_found():
    resp = client.get("/restaurants/nope")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Restaurant not found"}


def test_cache_stats():
    client.get("/restaurants/r01")
    resp = client.get("/cache/stats")
    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {"search", "details", "categories"}
    assert "hit_rate" in body["details"]
