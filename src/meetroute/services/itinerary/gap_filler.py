"""Greedy insertion of flexible meetings into the gaps before fixed meetings."""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from ...models.domain import ItineraryStop, Location, MeetingCandidate
from ..geospatial import has_coordinates, leg_miles, travel_minutes
from .models import OptimizerParameters, WalkState, keep_fixed, place_flexible
from .scoring import InsertionScorer

logger = logging.getLogger(__name__)


def fill_gap(
    state: WalkState,
    pool: list[MeetingCandidate],
    *,
    window_end: int,
    next_location: Optional[Location],
    parameters: OptimizerParameters,
    scorer: InsertionScorer,
) -> tuple[WalkState, list[ItineraryStop]]:
    """Insert flexible meetings from ``pool`` until the gap ending at ``window_end`` is full.

    Selected candidates are removed from ``pool``. Each round scores every
    located candidate that can still be visited and left in time to reach
    ``next_location`` by ``window_end``; the lowest score wins and ties go to
    the candidate seen first. Candidates without usable coordinates are never
    inserted here.
    """
    duration = parameters.flexible_meeting_minutes
    radius = parameters.earth_radius_miles
    speed = parameters.average_speed_mph
    placements: list[ItineraryStop] = []

    while pool and state.current_time + duration + parameters.gap_fill_margin_minutes <= window_end:
        best_idx = -1
        best_score = math.inf
        best_travel = 0

        for idx, candidate in enumerate(pool):
            if not has_coordinates(candidate.location):
                continue
            dist_from_current = leg_miles(state.current_location, candidate.location, radius)
            dist_to_next = leg_miles(candidate.location, next_location, radius)
            travel_in = travel_minutes(dist_from_current, speed)
            travel_out = travel_minutes(dist_to_next, speed)
            if state.current_time + travel_in + duration + travel_out > window_end:
                continue
            score = scorer.score(dist_from_current, dist_to_next)
            if score < best_score:
                best_idx = idx
                best_score = score
                best_travel = travel_in

        if best_idx == -1:
            break

        selected = pool.pop(best_idx)
        start = state.current_time + best_travel
        placements.append(place_flexible(selected, start, duration))
        logger.debug(
            "Inserted flexible meeting %s at minute %d (score %.3f, travel %d min)",
            selected.meeting_id,
            start,
            best_score,
            best_travel,
        )
        state = state.advance(start + duration, selected.location)

    return state, placements


def fill_gaps(
    fixed: Sequence[MeetingCandidate],
    flexible: Sequence[MeetingCandidate],
    *,
    parameters: OptimizerParameters,
    scorer: InsertionScorer,
) -> tuple[WalkState, list[ItineraryStop], list[MeetingCandidate]]:
    """Walk the fixed meetings in order, filling each preceding gap.

    Returns the state after the last fixed meeting, the stops in visiting
    order and the flexible meetings that did not fit any gap.
    """
    state = WalkState(current_time=parameters.day_start_minutes)
    pool = list(flexible)
    stops: list[ItineraryStop] = []

    for meeting in fixed:
        available = meeting.window.start_minutes - state.current_time
        if available > parameters.min_gap_minutes and pool:
            state, placements = fill_gap(
                state,
                pool,
                window_end=meeting.window.start_minutes - parameters.pre_fixed_buffer_minutes,
                next_location=meeting.location,
                parameters=parameters,
                scorer=scorer,
            )
            stops.extend(placements)
        stops.append(keep_fixed(meeting))
        state = state.advance(meeting.window.end_minutes, meeting.location)

    return state, stops, pool
