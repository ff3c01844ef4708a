"""Tests for Pydantic schemas."""
from __future__ import annotations

import math
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from cartpilot.schemas.basket import AddBasketItemRequest, BasketItem, StoredBasketItem, UpdateQuantityRequest
from cartpilot.schemas.products import Product, ProductLocation
from cartpilot.schemas.stores import Coordinate, Store


class TestCoordinate:
    def test_valid(self):
        coord = Coordinate(latitude=53.4825, longitude=-2.2448)
        assert coord.latitude == 53.4825

    @pytest.mark.parametrize(
        "lat, lon",
        [(91, 0), (-91, 0), (0, 181), (0, -181), (math.nan, 0), (0, math.inf)],
    )
    def test_rejects_out_of_range_and_non_finite(self, lat, lon):
        with pytest.raises(ValidationError):
            Coordinate(latitude=lat, longitude=lon)

    def test_frozen(self):
        coord = Coordinate(latitude=1, longitude=1)
        with pytest.raises(ValidationError):
            coord.latitude = 2


class TestStore:
    def test_coordinate_property(self, store_directory):
        store = store_directory.get("tesco-manchester-arndale")
        assert store.coordinate == Coordinate(latitude=53.4825, longitude=-2.2448)

    def test_distance_optional(self):
        store = Store(
            id="x", name="X", chain="Tesco", address="1 High St", postcode="M1 1AA",
            latitude=53.0, longitude=-2.0,
        )
        assert store.distance is None


class TestProduct:
    def test_default_location_from_aisle_and_category(self):
        product = Product(id="x", name="Tea", category="Hot Drinks", aisle=4, price=2.8)
        assert product.location == ProductLocation(aisle=4, section="Hot Drinks")

    def test_explicit_location_kept(self):
        product = Product(
            id="x", name="Tea", category="Hot Drinks", aisle=4, price=2.8,
            location=ProductLocation(aisle=4, section="Tea & Coffee"),
        )
        assert product.location.section == "Tea & Coffee"

    def test_search_terms(self, chicken):
        assert chicken.search_terms == ["Meat & Poultry", "chicken", "meat"]

    @pytest.mark.parametrize("field, value", [("aisle", 0), ("price", -1)])
    def test_bounds(self, field, value):
        data = {"id": "x", "name": "Tea", "category": "Hot Drinks", "aisle": 4, "price": 2.8}
        data[field] = value
        with pytest.raises(ValidationError):
            Product(**data)


class TestBasketSchemas:
    def test_quantity_must_be_positive(self, chicken):
        with pytest.raises(ValidationError):
            BasketItem(id="7-1", product=chicken, quantity=0, added_at=datetime.now(timezone.utc))

    def test_line_total(self, chicken):
        item = BasketItem(id="7-1", product=chicken, quantity=3, added_at=datetime.now(timezone.utc))
        assert item.line_total == pytest.approx(13.5)

    def test_stored_item_uses_camel_case(self, chicken):
        item = BasketItem(id="7-1", product=chicken, quantity=1, added_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
        dumped = StoredBasketItem.from_item(item).model_dump(by_alias=True)
        assert dumped["productId"] == "7"
        assert "addedAt" in dumped
        assert StoredBasketItem.model_validate(dumped).to_item() == item

    def test_add_request_requires_id(self):
        with pytest.raises(ValidationError):
            AddBasketItemRequest(product_id="")

    def test_update_request_accepts_any_quantity(self):
        assert UpdateQuantityRequest(quantity=250).quantity == 250
        assert UpdateQuantityRequest(quantity=0).quantity == 0
