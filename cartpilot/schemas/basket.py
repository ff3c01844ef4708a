from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from cartpilot.schemas.products import Product


class BasketItem(BaseModel):
    id: str
    product: Product
    quantity: int = Field(ge=1)
    added_at: datetime

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity


class StoredBasketItem(BaseModel):
    """Storage shape of a basket item: ``{id, productId, product, quantity, addedAt}``."""

    id: str
    product_id: str = Field(alias="productId")
    product: Product
    quantity: int = Field(ge=1)
    added_at: datetime = Field(alias="addedAt")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_item(cls, item: BasketItem) -> "StoredBasketItem":
        return cls(
            id=item.id,
            product_id=item.product.id,
            product=item.product,
            quantity=item.quantity,
            added_at=item.added_at,
        )

    def to_item(self) -> BasketItem:
        return BasketItem(id=self.id, product=self.product, quantity=self.quantity, added_at=self.added_at)


class AddBasketItemRequest(BaseModel):
    product_id: str = Field(min_length=1)


class UpdateQuantityRequest(BaseModel):
    # Zero or negative removes the item
    quantity: int


class BasketResponse(BaseModel):
    items: list[BasketItem]
    total_items: int
    total_price: float


class RouteStop(BaseModel):
    aisle: int
    sections: list[str]
    items: list[BasketItem]


class RoutePlan(BaseModel):
    stops: list[RouteStop]
    total_items: int
    total_price: float


__all__ = [
    "BasketItem",
    "StoredBasketItem",
    "AddBasketItemRequest",
    "UpdateQuantityRequest",
    "BasketResponse",
    "RouteStop",
    "RoutePlan",
]
