from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from cartpilot.core.config import Settings
from cartpilot.routes.deps import get_app_settings, get_product_catalog
from cartpilot.schemas.products import Product, ProductListResponse
from cartpilot.services.search import ProductCatalog

router = APIRouter(prefix="/products", tags=["products"])

MAX_SEARCH_LIMIT = 50


@router.get("")
async def list_products(catalog: ProductCatalog = Depends(get_product_catalog)) -> ProductListResponse:
    items = catalog.all()
    return ProductListResponse(items=items, total=len(items), query="")


@router.get("/search")
async def search(
    q: str = Query("", max_length=100),
    limit: Optional[int] = Query(None, ge=1, le=MAX_SEARCH_LIMIT),
    catalog: ProductCatalog = Depends(get_product_catalog),
    settings: Settings = Depends(get_app_settings),
) -> ProductListResponse:
    """Fuzzy product search. Short queries return an empty list, not an error."""
    items = catalog.search(
        q,
        limit if limit is not None else settings.search_result_limit,
        min_length=settings.search_min_query_length,
    )
    return ProductListResponse(items=items, total=len(items), query=q)


@router.get("/{product_id}")
async def product_detail(product_id: str, catalog: ProductCatalog = Depends(get_product_catalog)) -> Product:
    product = catalog.get(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
