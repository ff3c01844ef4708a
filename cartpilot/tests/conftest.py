"""Test fixtures and configuration for CartPilot API tests."""
from __future__ import annotations

import os
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import httpx
import pytest


def pytest_configure(config):
    """Set up environment variables before any test imports happen."""
    os.environ["ENVIRONMENT"] = "development"
    os.environ["BASKET_BACKEND"] = "memory"
    os.environ["RATE_LIMIT"] = "1000/minute"
    os.environ["POSTCODE_API_BASE"] = "https://postcodes.test"
    os.environ["CORS_ORIGINS"] = "http://localhost:5173"

    try:
        from cartpilot.core.config import get_settings
        get_settings.cache_clear()
    except ImportError:
        pass


from fastapi.testclient import TestClient

from cartpilot.db.seed import PRODUCT_CATALOG, UK_SUPERMARKETS
from cartpilot.schemas.products import Product
from cartpilot.services.basket import Basket, KeyValueBasketStorage
from cartpilot.services.cache import MemoryKeyValueStore
from cartpilot.services.search import ProductCatalog
from cartpilot.services.stores import StoreDirectory

# Canned postcodes.io answers keyed by normalized postcode
KNOWN_POSTCODES: dict[str, dict[str, Any]] = {
    "M4 3AH": {
        "postcode": "M4 3AH",
        "latitude": 53.4825,
        "longitude": -2.2448,
        "admin_district": "Manchester",
        "admin_ward": "Piccadilly",
        "country": "England",
    },
    "W1D 1LL": {
        "postcode": "W1D 1LL",
        "latitude": 51.5165,
        "longitude": -0.1364,
        "admin_district": "Westminster",
        "admin_ward": "West End",
        "country": "England",
    },
}


def postcodes_io_handler(request: httpx.Request) -> httpx.Response:
    """Fake postcodes.io: knows KNOWN_POSTCODES and 404s everything else."""
    postcode = request.url.path.rsplit("/", 1)[-1]
    result = KNOWN_POSTCODES.get(postcode)
    if result is None:
        return httpx.Response(404, json={"status": 404, "error": "Postcode not found"})
    return httpx.Response(200, json={"status": 200, "result": result})


@pytest.fixture
def geocoder() -> Callable[[httpx.Request], httpx.Response]:
    """Request handler behind the mocked geocoding transport. Override per test if needed."""
    return postcodes_io_handler


@pytest.fixture
def http_client(geocoder) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(geocoder))


@pytest.fixture
def kv_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def test_settings():
    """Get test settings."""
    from cartpilot.core.config import get_settings
    get_settings.cache_clear()
    return get_settings()


@pytest.fixture
def client(test_settings, kv_store, http_client) -> Iterator[TestClient]:
    """A test client around a fresh app with in-memory storage and a fake geocoder."""
    from cartpilot.main import create_app

    app = create_app(test_settings, kv_store=kv_store, http_client=http_client)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store_directory() -> StoreDirectory:
    return StoreDirectory(UK_SUPERMARKETS)


@pytest.fixture
def product_catalog() -> ProductCatalog:
    return ProductCatalog(PRODUCT_CATALOG)


@pytest.fixture
def chicken(product_catalog) -> Product:
    """Product 7: Chicken Breast, aisle 5, 4.50."""
    return product_catalog.get("7")


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock that advances one second per call."""
    start = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
    ticks = iter(range(10_000))
    return lambda: start + timedelta(seconds=next(ticks))


@pytest.fixture
def basket_storage(kv_store) -> KeyValueBasketStorage:
    return KeyValueBasketStorage(kv_store)


@pytest.fixture
def basket(basket_storage, fixed_clock) -> Basket:
    return Basket(basket_storage, clock=fixed_clock)
