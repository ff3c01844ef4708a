from __future__ import annotations

from typing import Iterable, Optional

from cartpilot.schemas.products import Product
from cartpilot.services.matching import matches

DEFAULT_MIN_QUERY_LENGTH = 2


def product_matches(product: Product, query: str) -> bool:
    if matches(product.name, query):
        return True
    return any(matches(term, query) for term in product.search_terms)


def search_products(
    query: str,
    catalog: Iterable[Product],
    limit: int,
    *,
    min_length: int = DEFAULT_MIN_QUERY_LENGTH,
) -> list[Product]:
    """First ``limit`` catalog products fuzzy-matching ``query``, in catalog order.

    Queries shorter than ``min_length`` yield no results rather than an error.
    """
    term = query.strip()
    if len(term) < min_length or limit <= 0:
        return []

    results: list[Product] = []
    for product in catalog:
        if product_matches(product, term):
            results.append(product)
            if len(results) >= limit:
                break
    return results


class ProductCatalog:
    """Lookup wrapper around the static product list."""

    def __init__(self, products: Iterable[Product]) -> None:
        self._products: list[Product] = list(products)
        self._by_id: dict[str, Product] = {product.id: product for product in self._products}

    def __iter__(self):
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def all(self) -> list[Product]:
        return list(self._products)

    def get(self, product_id: str) -> Optional[Product]:
        return self._by_id.get(product_id)

    def search(self, query: str, limit: int, *, min_length: int = DEFAULT_MIN_QUERY_LENGTH) -> list[Product]:
        return search_products(query, self._products, limit, min_length=min_length)


__all__ = ["search_products", "product_matches", "ProductCatalog", "DEFAULT_MIN_QUERY_LENGTH"]
