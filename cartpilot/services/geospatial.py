from __future__ import annotations

import math

from cartpilot.schemas.stores import Coordinate

EARTH_RADIUS_MILES = 3959.0

# Average door-to-door speeds in mph
TRAVEL_SPEEDS_MPH = {
    "driving": 25.0,
    "walking": 3.0,
    "transit": 15.0,
}


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in miles, rounded to one decimal place.

    Inputs must be finite; NaN or infinite coordinates give an undefined result and
    should be rejected by the caller.
    """
    lat1_rad, lon1_rad = math.radians(lat1), math.radians(lon1)
    lat2_rad, lon2_rad = math.radians(lat2), math.radians(lon2)

    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad

    a = math.sin(dlat / 2) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    # Clamp due to floating-point drift so we never take sqrt of a negative.
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round(EARTH_RADIUS_MILES * c, 1)


def distance_between(a: Coordinate, b: Coordinate) -> float:
    return haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)


def format_distance(miles: float) -> str:
    if miles < 0.1:
        return "< 0.1 miles"
    return f"{miles:.1f} miles"


def estimate_travel_time(miles: float, mode: str = "driving") -> int:
    """Rough travel time in whole minutes."""
    try:
        speed = TRAVEL_SPEEDS_MPH[mode]
    except KeyError:
        raise ValueError(f"mode must be one of: {', '.join(sorted(TRAVEL_SPEEDS_MPH))}") from None
    return round(miles / speed * 60)


__all__ = [
    "EARTH_RADIUS_MILES",
    "haversine_distance",
    "distance_between",
    "format_distance",
    "estimate_travel_time",
]
