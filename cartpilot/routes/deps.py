"""FastAPI dependencies.

Services are built once per application in ``cartpilot.main.create_app`` and kept on
``app.state``; these helpers hand them to endpoints via ``Depends()``.
"""
from __future__ import annotations

from fastapi import Header, Request

from cartpilot.core.config import Settings
from cartpilot.services.basket import Basket, KeyValueBasketStorage
from cartpilot.services.cache import KeyValueStore
from cartpilot.services.postcodes import PostcodeService
from cartpilot.services.search import ProductCatalog
from cartpilot.services.stores import StoreDirectory

DEFAULT_SESSION = "default"


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store_directory(request: Request) -> StoreDirectory:
    return request.app.state.store_directory


def get_product_catalog(request: Request) -> ProductCatalog:
    return request.app.state.product_catalog


def get_postcode_service(request: Request) -> PostcodeService:
    return request.app.state.postcode_service


def get_key_value_store(request: Request) -> KeyValueStore:
    return request.app.state.kv_store


def basket_storage_key(base_key: str, session: str) -> str:
    """The default session uses the bare key so single-user setups keep one well-known key."""
    if session == DEFAULT_SESSION:
        return base_key
    return f"{base_key}:{session}"


def get_basket(
    request: Request,
    x_basket_session: str = Header(DEFAULT_SESSION, pattern=r"^[A-Za-z0-9_-]{1,64}$"),
) -> Basket:
    settings: Settings = request.app.state.settings
    storage = KeyValueBasketStorage(
        request.app.state.kv_store,
        key=basket_storage_key(settings.basket_storage_key, x_basket_session),
    )
    return Basket(storage)


__all__ = [
    "DEFAULT_SESSION",
    "basket_storage_key",
    "get_app_settings",
    "get_store_directory",
    "get_product_catalog",
    "get_postcode_service",
    "get_key_value_store",
    "get_basket",
]
