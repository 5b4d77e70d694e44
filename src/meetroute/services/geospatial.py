"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Optional

from ..models.domain import Location

EARTH_RADIUS_MILES = 3959.0
AVERAGE_SPEED_MPH = 30.0


def haversine_miles(lat1: float, lon1: float, lat2: float, lon2: float, radius: float = EARTH_RADIUS_MILES) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    a = min(max(a, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return radius * c


def distance_miles(a: Location, b: Location, radius: float = EARTH_RADIUS_MILES) -> float:
    """Great-circle distance in miles between two locations.

    Coordinates are not range checked; out-of-range values yield a finite but
    meaningless distance.
    """

    return haversine_miles(a.latitude, a.longitude, b.latitude, b.longitude, radius)


def has_coordinates(location: Optional[Location]) -> bool:
    """True when the location exists and both coordinates are finite numbers."""

    return location is not None and math.isfinite(location.latitude) and math.isfinite(location.longitude)


def leg_miles(a: Optional[Location], b: Optional[Location], radius: float = EARTH_RADIUS_MILES) -> float:
    """Distance of a leg, or 0 when either endpoint has no usable location."""

    if not has_coordinates(a) or not has_coordinates(b):
        return 0.0
    return distance_miles(a, b, radius)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def travel_minutes(miles: float, speed_mph: float = AVERAGE_SPEED_MPH) -> int:
    """Estimated drive time for ``miles`` at a constant average speed.

    No traffic model: the speed is a flat assumption (30 mph by default).
    """

    return round_half_up(miles / speed_mph * 60)
