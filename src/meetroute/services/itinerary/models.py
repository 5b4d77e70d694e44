"""Itinerary optimizer working models."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ...config import settings
from ...models.domain import ItineraryStop, Location, MeetingCandidate, TimeWindow
from .clock import parse_clock


@dataclass(slots=True)
class OptimizerParameters:
    day_start_minutes: int = parse_clock(settings.day_start)
    flexible_meeting_minutes: int = settings.flexible_meeting_minutes
    min_gap_minutes: int = settings.min_gap_minutes
    pre_fixed_buffer_minutes: int = settings.pre_fixed_buffer_minutes
    post_fixed_buffer_minutes: int = settings.post_fixed_buffer_minutes
    gap_fill_margin_minutes: int = settings.gap_fill_margin_minutes
    average_speed_mph: float = settings.average_speed_mph
    earth_radius_miles: float = settings.earth_radius_miles
    next_fixed_weight: float = settings.next_fixed_weight
    reject_fixed_conflicts: bool = settings.reject_fixed_conflicts


@dataclass(frozen=True, slots=True)
class WalkState:
    """Position of the walk through the day: the clock and the anchor location."""

    current_time: int
    current_location: Optional[Location] = None

    def advance(self, current_time: int, current_location: Optional[Location]) -> WalkState:
        return replace(self, current_time=current_time, current_location=current_location)


def place_flexible(candidate: MeetingCandidate, start: int, duration: int) -> ItineraryStop:
    return ItineraryStop(
        meeting_id=candidate.meeting_id,
        window=TimeWindow(start, start + duration),
        was_flexible=True,
        location=candidate.location,
        priority=candidate.priority,
        title=candidate.title,
    )


def keep_fixed(candidate: MeetingCandidate) -> ItineraryStop:
    return ItineraryStop(
        meeting_id=candidate.meeting_id,
        window=candidate.window,
        was_flexible=False,
        location=candidate.location,
        priority=candidate.priority,
        title=candidate.title,
    )
