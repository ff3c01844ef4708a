from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from cartpilot.core.config import Settings
from cartpilot.routes.deps import get_app_settings, get_postcode_service, get_store_directory
from cartpilot.schemas.stores import (
    ChainListResponse,
    Coordinate,
    Store,
    StoreDetailResponse,
    StoreListResponse,
    StoreSchema,
)
from cartpilot.services.geospatial import estimate_travel_time, format_distance
from cartpilot.services.postcodes import PostcodeService
from cartpilot.services.stores import StoreDirectory

router = APIRouter(prefix="/stores", tags=["stores"])


def _resolve_radius(radius_miles: Optional[float], settings: Settings) -> float:
    radius = radius_miles if radius_miles is not None else settings.default_radius_miles
    if radius <= 0:
        raise HTTPException(status_code=400, detail="radius_miles must be positive")
    if radius > settings.max_radius_miles:
        raise HTTPException(
            status_code=400,
            detail=f"Search radius cannot exceed {settings.max_radius_miles:g} miles",
        )
    return radius


def _to_schema(store: Store) -> StoreSchema:
    if store.distance is None:
        return StoreSchema(**store.model_dump())
    return StoreSchema(
        **store.model_dump(),
        distance_label=format_distance(store.distance),
        travel_minutes=estimate_travel_time(store.distance),
    )


@router.get("")
async def stores_nearby(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    radius_miles: Optional[float] = Query(None),
    directory: StoreDirectory = Depends(get_store_directory),
    settings: Settings = Depends(get_app_settings),
) -> StoreListResponse:
    radius = _resolve_radius(radius_miles, settings)
    origin = Coordinate(latitude=lat, longitude=lon)
    stores = directory.find_nearby(origin, radius)
    return StoreListResponse(items=[_to_schema(s) for s in stores], radius_miles=radius, origin=origin)


@router.get("/by-postcode")
async def stores_near_postcode(
    postcode: str = Query(..., min_length=1, max_length=16),
    radius_miles: Optional[float] = Query(None),
    directory: StoreDirectory = Depends(get_store_directory),
    postcodes: PostcodeService = Depends(get_postcode_service),
    settings: Settings = Depends(get_app_settings),
) -> StoreListResponse:
    radius = _resolve_radius(radius_miles, settings)
    # InvalidPostcode / LookupFailed are mapped to 400 / 404 by the app handlers
    location = await postcodes.lookup(postcode)
    origin = location.coordinate
    stores = directory.find_nearby(origin, radius)
    return StoreListResponse(
        items=[_to_schema(s) for s in stores],
        radius_miles=radius,
        origin=origin,
        location=location,
    )


@router.get("/search")
async def search_stores(
    q: str = Query(..., min_length=1, max_length=100),
    directory: StoreDirectory = Depends(get_store_directory),
) -> StoreListResponse:
    return StoreListResponse(items=[_to_schema(s) for s in directory.search(q)])


@router.get("/chains")
async def store_chains(directory: StoreDirectory = Depends(get_store_directory)) -> ChainListResponse:
    return ChainListResponse(items=directory.chains())


@router.get("/chains/{chain}")
async def stores_for_chain(chain: str, directory: StoreDirectory = Depends(get_store_directory)) -> StoreListResponse:
    return StoreListResponse(items=[_to_schema(s) for s in directory.by_chain(chain)])


@router.get("/{store_id}")
async def store_detail(
    store_id: str,
    from_postcode: Optional[str] = Query(None, max_length=16),
    directory: StoreDirectory = Depends(get_store_directory),
) -> StoreDetailResponse:
    store = directory.get(store_id)
    if store is None:
        raise HTTPException(status_code=404, detail="Store not found")
    return StoreDetailResponse(store=store, directions_url=directory.directions_url(store, from_postcode))
