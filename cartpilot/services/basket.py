from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Protocol

from pydantic import TypeAdapter, ValidationError

from cartpilot.core.errors import PersistenceCorrupt
from cartpilot.schemas.basket import BasketItem, StoredBasketItem
from cartpilot.schemas.products import Product
from cartpilot.services.cache import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "quickshop-basket"

_stored_items = TypeAdapter(list[StoredBasketItem])


class BasketStorage(Protocol):
    def load(self) -> list[BasketItem]: ...

    def save(self, items: list[BasketItem]) -> None: ...


def serialize_items(items: list[BasketItem]) -> str:
    stored = [StoredBasketItem.from_item(item) for item in items]
    return _stored_items.dump_json(stored, by_alias=True).decode()


def deserialize_items(raw: str) -> list[BasketItem]:
    try:
        stored = _stored_items.validate_json(raw)
    except ValidationError as exc:
        raise PersistenceCorrupt(f"stored basket is not valid: {exc.error_count()} error(s)") from exc

    items: list[BasketItem] = []
    seen: set[str] = set()
    for entry in stored:
        if entry.product_id != entry.product.id:
            raise PersistenceCorrupt(f"item {entry.id} references two different products")
        if entry.product_id in seen:
            raise PersistenceCorrupt(f"product {entry.product_id} stored more than once")
        seen.add(entry.product_id)
        items.append(entry.to_item())
    return items


class KeyValueBasketStorage:
    """Persists a basket as a JSON array under a single key."""

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> list[BasketItem]:
        try:
            raw = self.store.get(self.key)
            if not raw:
                return []
            return deserialize_items(raw)
        except UnicodeDecodeError as exc:
            # Redis decodes responses; bytes that are not UTF-8 fail inside get()
            logger.warning("Discarding undecodable basket under %r: %s", self.key, exc)
            self.store.delete(self.key)
            return []
        except PersistenceCorrupt as exc:
            logger.warning("Discarding corrupt basket under %r: %s", self.key, exc)
            self.store.delete(self.key)
            return []

    def save(self, items: list[BasketItem]) -> None:
        self.store.set(self.key, serialize_items(items))


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class Basket:
    """A user's shopping basket: one item per product, persisted after every change.

    Totals and the aisle ordering are computed from the current items on every access.
    """

    def __init__(self, storage: BasketStorage, clock: Optional[Callable[[], datetime]] = None) -> None:
        self.storage = storage
        self._clock = clock or _utcnow
        self._items: list[BasketItem] = storage.load()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, product_id: object) -> bool:
        return any(item.product.id == product_id for item in self._items)

    @property
    def items(self) -> list[BasketItem]:
        return list(self._items)

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self._items)

    @property
    def total_price(self) -> float:
        return sum(item.product.price * item.quantity for item in self._items)

    @property
    def sorted_by_aisle(self) -> list[BasketItem]:
        # sorted() is stable, so items sharing an aisle keep insertion order
        return sorted(self._items, key=lambda item: item.product.aisle)

    def get(self, product_id: str) -> Optional[BasketItem]:
        for item in self._items:
            if item.product.id == product_id:
                return item
        return None

    def add_item(self, product: Product) -> BasketItem:
        for index, item in enumerate(self._items):
            if item.product.id == product.id:
                updated = item.model_copy(update={"quantity": item.quantity + 1})
                self._items[index] = updated
                self._persist()
                return updated

        added_at = self._clock()
        item = BasketItem(
            id=f"{product.id}-{int(added_at.timestamp() * 1000)}",
            product=product,
            quantity=1,
            added_at=added_at,
        )
        self._items.append(item)
        self._persist()
        logger.debug("Added %s to basket", product.name)
        return item

    def remove_item(self, product_id: str) -> None:
        remaining = [item for item in self._items if item.product.id != product_id]
        if len(remaining) == len(self._items):
            return
        self._items = remaining
        self._persist()

    def update_quantity(self, product_id: str, quantity: int) -> None:
        if quantity <= 0:
            self.remove_item(product_id)
            return
        for index, item in enumerate(self._items):
            if item.product.id == product_id:
                self._items[index] = item.model_copy(update={"quantity": quantity})
                self._persist()
                return

    def clear(self) -> None:
        self._items = []
        self._persist()

    def _persist(self) -> None:
        self.storage.save(self._items)


__all__ = [
    "DEFAULT_STORAGE_KEY",
    "BasketStorage",
    "KeyValueBasketStorage",
    "Basket",
    "serialize_items",
    "deserialize_items",
]
