from __future__ import annotations

import logging
from typing import Iterable, Optional
from urllib.parse import quote

from cartpilot.schemas.stores import Coordinate, Store
from cartpilot.services.geospatial import haversine_distance

logger = logging.getLogger(__name__)

GOOGLE_MAPS_BASE = "https://www.google.com/maps"


class StoreDirectory:
    """Read-only view over a fixed store catalog."""

    def __init__(self, stores: Iterable[Store]) -> None:
        self._stores: list[Store] = list(stores)
        self._by_id: dict[str, Store] = {store.id: store for store in self._stores}

    def __len__(self) -> int:
        return len(self._stores)

    def all(self) -> list[Store]:
        return list(self._stores)

    def get(self, store_id: str) -> Optional[Store]:
        return self._by_id.get(store_id)

    def find_nearby(self, origin: Coordinate, radius: float) -> list[Store]:
        """Stores within ``radius`` miles of ``origin``, nearest first.

        Each result is a copy carrying its distance; ties on distance are ordered by id.
        """
        with_distance = [
            store.model_copy(
                update={
                    "distance": haversine_distance(
                        origin.latitude, origin.longitude, store.latitude, store.longitude
                    )
                }
            )
            for store in self._stores
        ]
        nearby = [store for store in with_distance if store.distance <= radius]
        nearby.sort(key=lambda store: (store.distance, store.id))

        logger.debug(
            "Found %d stores within %s miles of %.4f, %.4f",
            len(nearby),
            radius,
            origin.latitude,
            origin.longitude,
        )
        return nearby

    def by_chain(self, chain: str) -> list[Store]:
        wanted = chain.strip().lower()
        return [store for store in self._stores if store.chain.lower() == wanted]

    def chains(self) -> list[str]:
        return sorted({store.chain for store in self._stores})

    def search(self, query: str) -> list[Store]:
        term = query.strip().lower()
        if not term:
            return []
        return [
            store
            for store in self._stores
            if term in store.name.lower()
            or term in store.address.lower()
            or term in store.postcode.lower()
            or term in store.chain.lower()
        ]

    @staticmethod
    def directions_url(store: Store, from_postcode: Optional[str] = None) -> str:
        destination = quote(f"{store.name}, {store.address}, {store.postcode}", safe="")
        if from_postcode:
            return f"{GOOGLE_MAPS_BASE}/dir/{quote(from_postcode, safe='')}/{destination}"
        return f"{GOOGLE_MAPS_BASE}/search/{destination}"


__all__ = ["StoreDirectory"]
