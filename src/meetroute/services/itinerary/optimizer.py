"""Itinerary optimizer entry point.

Orders one day's in-person meetings into a single visiting sequence. Fixed
meetings keep their windows; flexible meetings are inserted greedily into the
gaps before fixed meetings and any leftovers are routed nearest-neighbour
after the last one. The result reports great-circle travel totals.
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Iterable, Optional

from ...models.domain import ItineraryPlan, MeetingCandidate
from .assembler import assemble
from .diagnostics import check_day_overflow, check_fixed_conflicts, check_fixed_windows
from .gap_filler import fill_gaps
from .models import OptimizerParameters, WalkState
from .partitioner import partition
from .router import route_flexible
from .scoring import InsertionScorer, WeightedDistanceScorer

logger = logging.getLogger(__name__)


def optimize_itinerary(
    candidates: Iterable[MeetingCandidate],
    *,
    day_start: Optional[int] = None,
    parameters: OptimizerParameters | None = None,
    scorer: InsertionScorer | None = None,
) -> ItineraryPlan:
    """Build an ordered itinerary for the given eligible meetings.

    Args:
        candidates: In-person, non-cancelled meetings for one day. Order only
            matters for tie-breaks.
        day_start: Minutes since midnight the walk starts from; defaults to
            ``parameters.day_start_minutes`` (08:00).
        parameters: Tuning constants; defaults come from settings.
        scorer: Gap insertion scoring strategy.

    Raises:
        InvalidTimeWindow: a fixed meeting ends before it starts.
        FixedMeetingConflict: two fixed meetings overlap and
            ``parameters.reject_fixed_conflicts`` is set.
    """
    started = time.perf_counter()
    parameters = parameters or OptimizerParameters()
    if day_start is not None:
        parameters = replace(parameters, day_start_minutes=day_start)
    scorer = scorer or WeightedDistanceScorer(parameters.next_fixed_weight)

    fixed, flexible = partition(list(candidates))
    check_fixed_windows(fixed)
    warnings = check_fixed_conflicts(fixed, reject=parameters.reject_fixed_conflicts)

    if not fixed:
        _, stops = route_flexible(WalkState(parameters.day_start_minutes), flexible, parameters=parameters)
    else:
        state, stops, leftovers = fill_gaps(fixed, flexible, parameters=parameters, scorer=scorer)
        if leftovers:
            state = state.advance(state.current_time + parameters.post_fixed_buffer_minutes, state.current_location)
            _, tail = route_flexible(state, leftovers, parameters=parameters)
            stops.extend(tail)

    warnings.extend(check_day_overflow(stops))
    plan = assemble(stops, parameters=parameters, warnings=warnings)
    logger.info(
        "Optimized itinerary: %d fixed, %d flexible, %.1f miles, %d travel min in %.2f ms",
        len(fixed),
        len(flexible),
        plan.total_distance_miles,
        plan.total_travel_minutes,
        (time.perf_counter() - started) * 1000,
    )
    return plan
