from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from cartpilot.routes.deps import get_basket, get_product_catalog
from cartpilot.schemas.basket import AddBasketItemRequest, BasketResponse, RoutePlan, UpdateQuantityRequest
from cartpilot.services.basket import Basket
from cartpilot.services.route import plan_route
from cartpilot.services.search import ProductCatalog

logger = logging.getLogger(__name__)

# Basket storage calls block (sync redis), so endpoints are plain def and run in the threadpool.
router = APIRouter(prefix="/basket", tags=["basket"])


def _snapshot(basket: Basket) -> BasketResponse:
    return BasketResponse(
        items=basket.items,
        total_items=basket.total_items,
        total_price=round(basket.total_price, 2),
    )


@router.get("")
def get_basket_contents(basket: Basket = Depends(get_basket)) -> BasketResponse:
    return _snapshot(basket)


@router.post("/items")
def add_to_basket(
    request: AddBasketItemRequest,
    basket: Basket = Depends(get_basket),
    catalog: ProductCatalog = Depends(get_product_catalog),
) -> BasketResponse:
    product = catalog.get(request.product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    basket.add_item(product)
    return _snapshot(basket)


@router.patch("/items/{product_id}")
def update_basket_item(
    product_id: str,
    request: UpdateQuantityRequest,
    basket: Basket = Depends(get_basket),
) -> BasketResponse:
    if product_id not in basket:
        raise HTTPException(status_code=404, detail="Product is not in the basket")
    basket.update_quantity(product_id, request.quantity)
    return _snapshot(basket)


@router.delete("/items/{product_id}")
def remove_basket_item(product_id: str, basket: Basket = Depends(get_basket)) -> BasketResponse:
    basket.remove_item(product_id)
    return _snapshot(basket)


@router.delete("")
def clear_basket(basket: Basket = Depends(get_basket)) -> BasketResponse:
    basket.clear()
    logger.info("Basket cleared")
    return _snapshot(basket)


@router.get("/route")
def basket_route(basket: Basket = Depends(get_basket)) -> RoutePlan:
    """Aisles to visit, lowest first."""
    return plan_route(basket)
