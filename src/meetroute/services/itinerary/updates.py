"""Time updates that turn optimized flexible placements into fixed meetings."""

from __future__ import annotations

from dataclasses import dataclass

from ...models.domain import ItineraryPlan
from .clock import format_clock


@dataclass(frozen=True, slots=True)
class TimeUpdate:
    meeting_id: str
    start_time: str
    end_time: str


def optimized_time_updates(plan: ItineraryPlan) -> list[TimeUpdate]:
    """Updates a caller persists to pin flexible meetings to their computed windows.

    Fixed stops are omitted since their times are unchanged.
    """
    return [
        TimeUpdate(
            meeting_id=stop.meeting_id,
            start_time=format_clock(stop.window.start_minutes),
            end_time=format_clock(stop.window.end_minutes),
        )
        for stop in plan.stops
        if stop.was_flexible
    ]
