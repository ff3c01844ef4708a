"""Tests for product API endpoints."""
from __future__ import annotations

from fastapi.testclient import TestClient


class TestProductsListEndpoint:
    def test_list_all(self, client: TestClient):
        response = client.get("/products")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 20
        assert data["items"][0]["name"] == "Whole Milk"

    def test_products_carry_location(self, client: TestClient):
        item = client.get("/products").json()["items"][6]
        assert item["location"] == {"aisle": 5, "section": "Meat & Poultry"}


class TestProductSearchEndpoint:
    """Tests for GET /products/search endpoint."""

    def test_search_by_synonym(self, client: TestClient):
        """Synonyms match as well as names."""
        response = client.get("/products/search", params={"q": "loo roll"})
        assert response.status_code == 200
        data = response.json()
        assert [item["name"] for item in data["items"]] == ["Toilet Roll"]
        assert data["total"] == 1
        assert data["query"] == "loo roll"

    def test_search_exact_name(self, client: TestClient):
        data = client.get("/products/search", params={"q": "eggs"}).json()
        assert [item["id"] for item in data["items"]] == ["9"]

    def test_short_query_returns_empty(self, client: TestClient):
        """One-character queries are not an error, just empty."""
        response = client.get("/products/search", params={"q": "m"})
        assert response.status_code == 200
        assert response.json()["items"] == []

    def test_missing_query_returns_empty(self, client: TestClient):
        assert client.get("/products/search").json()["items"] == []

    def test_default_limit(self, client: TestClient, test_settings):
        data = client.get("/products/search", params={"q": "ee"}).json()
        assert 0 < len(data["items"]) <= test_settings.search_result_limit

    def test_explicit_limit(self, client: TestClient):
        data = client.get("/products/search", params={"q": "milk", "limit": 1}).json()
        assert [item["id"] for item in data["items"]] == ["1"]

    def test_limit_bounds(self, client: TestClient):
        assert client.get("/products/search", params={"q": "milk", "limit": 0}).status_code == 422
        assert client.get("/products/search", params={"q": "milk", "limit": 51}).status_code == 422


class TestProductDetailEndpoint:
    def test_detail(self, client: TestClient):
        response = client.get("/products/8")
        assert response.status_code == 200
        assert response.json()["name"] == "Cheddar Cheese"

    def test_detail_not_found(self, client: TestClient):
        response = client.get("/products/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found"
