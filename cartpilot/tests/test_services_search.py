"""Tests for product search."""
from __future__ import annotations

import pytest

from cartpilot.schemas.products import Product
from cartpilot.services.search import search_products


def _product(pid: str, name: str, category: str = "Misc", synonyms: list[str] | None = None) -> Product:
    return Product(id=pid, name=name, category=category, synonyms=synonyms or [], aisle=1, price=1.0)


class TestSearchProducts:
    def test_matches_by_name(self, product_catalog):
        results = search_products("chee", product_catalog, 8)
        assert "Cheddar Cheese" in [p.name for p in results]

    def test_matches_by_synonym(self, product_catalog):
        results = search_products("loo roll", product_catalog, 8)
        assert [p.name for p in results] == ["Toilet Roll"]

    def test_matches_by_category(self):
        catalog = [_product("1", "Zzz", category="Frozen"), _product("2", "Yyy")]
        assert [p.id for p in search_products("frozen", catalog, 5)] == ["1"]

    def test_preserves_catalog_order(self, product_catalog):
        results = search_products("milk", product_catalog, 8)
        ids = [p.id for p in results]
        catalog_ids = [p.id for p in product_catalog]
        assert ids == sorted(ids, key=catalog_ids.index)
        assert ids[:2] == ["1", "2"]

    def test_truncates_to_limit(self, product_catalog):
        everything = search_products("e", product_catalog, 100, min_length=1)
        assert len(everything) > 3
        assert search_products("e", product_catalog, 3, min_length=1) == everything[:3]

    def test_short_query_returns_empty(self, product_catalog):
        assert search_products("m", product_catalog, 8) == []

    def test_blank_query_returns_empty(self, product_catalog):
        assert search_products("   ", product_catalog, 8) == []

    def test_configurable_minimum(self, product_catalog):
        assert search_products("egg", product_catalog, 8, min_length=4) == []
        assert [p.name for p in search_products("eggs", product_catalog, 8, min_length=4)] == ["Eggs"]

    def test_no_matches(self, product_catalog):
        assert search_products("qqqq", product_catalog, 8) == []

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit(self, product_catalog, limit):
        assert search_products("milk", product_catalog, limit) == []

    def test_subsequence_hits_are_included(self):
        catalog = [_product("1", "Milk"), _product("2", "Bread")]
        assert [p.id for p in search_products("mk", catalog, 5)] == ["1"]

    def test_accepts_any_iterable(self):
        generator = (_product(str(i), f"Item {i}") for i in range(20))
        assert len(search_products("item", generator, 4)) == 4


class TestProductCatalog:
    def test_get(self, product_catalog):
        assert product_catalog.get("8").name == "Cheddar Cheese"

    def test_get_unknown(self, product_catalog):
        assert product_catalog.get("999") is None

    def test_search_delegates(self, product_catalog):
        assert product_catalog.search("bread", 8) == search_products("bread", product_catalog, 8)

    def test_length(self, product_catalog):
        assert len(product_catalog) == 20
