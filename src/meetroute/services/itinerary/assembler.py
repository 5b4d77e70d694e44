"""Final plan assembly and aggregate travel statistics."""

from __future__ import annotations

from typing import Iterable, Sequence

from ...models.domain import ItineraryPlan, ItineraryStop
from ..geospatial import leg_miles, travel_minutes
from .models import OptimizerParameters


def total_distance(stops: Sequence[ItineraryStop], radius: float) -> float:
    """Sum of consecutive legs; legs missing an endpoint location count as 0."""
    return sum(leg_miles(previous.location, current.location, radius) for previous, current in zip(stops, stops[1:]))


def assemble(
    stops: Sequence[ItineraryStop],
    *,
    parameters: OptimizerParameters,
    warnings: Iterable[str] = (),
) -> ItineraryPlan:
    distance = total_distance(stops, parameters.earth_radius_miles)
    return ItineraryPlan(
        stops=list(stops),
        total_distance_miles=distance,
        total_travel_minutes=travel_minutes(distance, parameters.average_speed_mph),
        warnings=list(warnings),
    )
