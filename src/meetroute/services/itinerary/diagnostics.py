"""Schedule checks reported alongside a plan."""

from __future__ import annotations

import logging
from typing import Sequence

from ...models.domain import ItineraryStop, MeetingCandidate
from .clock import format_clock
from .errors import FixedMeetingConflict, InvalidTimeWindow

MINUTES_PER_DAY = 24 * 60

logger = logging.getLogger(__name__)


def check_fixed_windows(fixed: Sequence[MeetingCandidate]) -> None:
    """Raise ``InvalidTimeWindow`` for a fixed meeting that ends before it starts."""
    for meeting in fixed:
        if meeting.window.end_minutes < meeting.window.start_minutes:
            raise InvalidTimeWindow(meeting.meeting_id, meeting.window.start_minutes, meeting.window.end_minutes)


def check_fixed_conflicts(fixed: Sequence[MeetingCandidate], *, reject: bool = False) -> list[str]:
    """Describe overlaps between chronologically sorted fixed meetings.

    Overlapping meetings are left untouched. With ``reject`` the first
    overlap raises ``FixedMeetingConflict`` instead.
    """
    warnings: list[str] = []
    latest: MeetingCandidate | None = None
    for later in fixed:
        earlier = latest
        if latest is None or later.window.end_minutes > latest.window.end_minutes:
            latest = later
        if earlier is None or not earlier.window.overlaps(later.window):
            continue
        if reject:
            raise FixedMeetingConflict(earlier.meeting_id, later.meeting_id)
        message = (
            f"Fixed meeting {later.meeting_id} starts at {format_clock(later.window.start_minutes)} "
            f"before {earlier.meeting_id} ends at {format_clock(earlier.window.end_minutes)}."
        )
        logger.warning(message)
        warnings.append(message)
    return warnings


def check_day_overflow(stops: Sequence[ItineraryStop]) -> list[str]:
    warnings: list[str] = []
    for stop in stops:
        if stop.window.end_minutes > MINUTES_PER_DAY:
            message = f"Meeting {stop.meeting_id} ends at {format_clock(stop.window.end_minutes)}, past midnight."
            logger.warning(message)
            warnings.append(message)
    return warnings
