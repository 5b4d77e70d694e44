"""Nearest-neighbour ordering of flexible meetings."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ...models.domain import ItineraryStop, MeetingCandidate
from ..geospatial import distance_miles, has_coordinates, travel_minutes
from .models import OptimizerParameters, WalkState, place_flexible

logger = logging.getLogger(__name__)


def route_flexible(
    state: WalkState,
    pool: Sequence[MeetingCandidate],
    *,
    parameters: OptimizerParameters,
) -> tuple[WalkState, list[ItineraryStop]]:
    """Place every meeting in ``pool`` one after another starting at ``state``.

    Located meetings are visited nearest first from the anchor location. When
    there is no anchor the first located meeting seeds the walk with no
    travel. Meetings without usable coordinates (missing, NaN or infinite)
    follow in input order with zero travel and leave the anchor untouched.
    """
    duration = parameters.flexible_meeting_minutes
    located = [candidate for candidate in pool if has_coordinates(candidate.location)]
    unlocated = [candidate for candidate in pool if not has_coordinates(candidate.location)]
    placements: list[ItineraryStop] = []

    if not has_coordinates(state.current_location) and located:
        seed = located.pop(0)
        placements.append(place_flexible(seed, state.current_time, duration))
        state = state.advance(state.current_time + duration, seed.location)

    while located:
        nearest_idx = 0
        nearest_dist = math.inf
        for idx, candidate in enumerate(located):
            dist = distance_miles(state.current_location, candidate.location, parameters.earth_radius_miles)
            if dist < nearest_dist:
                nearest_idx = idx
                nearest_dist = dist

        selected = located.pop(nearest_idx)
        start = state.current_time + travel_minutes(nearest_dist, parameters.average_speed_mph)
        placements.append(place_flexible(selected, start, duration))
        state = state.advance(start + duration, selected.location)

    for candidate in unlocated:
        placements.append(place_flexible(candidate, state.current_time, duration))
        state = state.advance(state.current_time + duration, state.current_location)

    if unlocated:
        logger.debug("Appended %d flexible meetings without a location", len(unlocated))
    return state, placements
