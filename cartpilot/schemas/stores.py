from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class Coordinate(BaseModel):
    latitude: float = Field(ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(ge=-180, le=180, allow_inf_nan=False)

    model_config = {"frozen": True}


class Store(BaseModel):
    id: str
    name: str
    chain: str
    address: str
    postcode: str
    latitude: float
    longitude: float
    phone: Optional[str] = None
    opening_hours: Optional[str] = None
    store_type: Optional[str] = None
    # Attached per query, miles
    distance: Optional[float] = None

    model_config = {"frozen": True}

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class PostcodeLocation(BaseModel):
    postcode: str
    latitude: float = Field(ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(ge=-180, le=180, allow_inf_nan=False)
    district: Optional[str] = None
    ward: Optional[str] = None
    country: Optional[str] = None

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class StoreSchema(Store):
    distance_label: Optional[str] = None
    # Driving estimate
    travel_minutes: Optional[int] = None


class StoreListResponse(BaseModel):
    items: list[StoreSchema]
    radius_miles: Optional[float] = None
    origin: Optional[Coordinate] = None
    location: Optional[PostcodeLocation] = None


class StoreDetailResponse(BaseModel):
    store: Store
    directions_url: str


class ChainListResponse(BaseModel):
    items: list[str]


__all__ = [
    "Coordinate",
    "Store",
    "PostcodeLocation",
    "StoreSchema",
    "StoreListResponse",
    "StoreDetailResponse",
    "ChainListResponse",
]
