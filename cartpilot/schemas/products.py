from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator


class ProductLocation(BaseModel):
    aisle: int = Field(ge=1)
    section: Optional[str] = None

    model_config = {"frozen": True}


class Product(BaseModel):
    id: str
    name: str
    category: str
    synonyms: list[str] = Field(default_factory=list)
    aisle: int = Field(ge=1)
    price: float = Field(ge=0, allow_inf_nan=False)
    location: Optional[ProductLocation] = None

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def default_location(cls, data: Any) -> Any:
        """Catalog entries without an explicit location sit in their aisle, category section."""
        if isinstance(data, dict) and data.get("location") is None and "aisle" in data:
            data = {**data, "location": {"aisle": data["aisle"], "section": data.get("category")}}
        return data

    @property
    def search_terms(self) -> list[str]:
        return [self.category, *self.synonyms]


class ProductListResponse(BaseModel):
    items: list[Product]
    total: int
    query: str


__all__ = ["ProductLocation", "Product", "ProductListResponse"]
