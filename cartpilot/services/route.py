from __future__ import annotations

from itertools import groupby

from cartpilot.schemas.basket import RoutePlan, RouteStop
from cartpilot.services.basket import Basket


def plan_route(basket: Basket) -> RoutePlan:
    """Aisle-by-aisle walk through the store for the current basket."""
    stops: list[RouteStop] = []
    for aisle, group in groupby(basket.sorted_by_aisle, key=lambda item: item.product.aisle):
        items = list(group)
        sections: list[str] = []
        for item in items:
            location = item.product.location
            section = location.section if location and location.section else item.product.category
            if section not in sections:
                sections.append(section)
        stops.append(RouteStop(aisle=aisle, sections=sections, items=items))

    return RoutePlan(
        stops=stops,
        total_items=basket.total_items,
        total_price=round(basket.total_price, 2),
    )


__all__ = ["plan_route"]
