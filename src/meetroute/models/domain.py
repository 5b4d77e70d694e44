"""Domain models for meetings, locations and itinerary plans."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class Location:
    """A point in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class TimeWindow:
    """Half-open interval ``[start_minutes, end_minutes)`` in minutes since midnight.

    Values are not wrapped at 1440, so a placement that spills past midnight
    keeps counting upwards.
    """

    start_minutes: int
    end_minutes: int

    @property
    def duration_minutes(self) -> int:
        return self.end_minutes - self.start_minutes

    def overlaps(self, other: "TimeWindow") -> bool:
        return self.start_minutes < other.end_minutes and other.start_minutes < self.end_minutes


@dataclass(frozen=True, slots=True)
class MeetingCandidate:
    """An eligible in-person meeting handed to the optimizer.

    A candidate with a ``window`` is fixed; without one it is flexible and the
    optimizer chooses its placement.
    """

    meeting_id: str
    window: Optional[TimeWindow] = None
    location: Optional[Location] = None
    duration_minutes: int = 60
    priority: Optional[str] = None
    title: Optional[str] = None

    @property
    def is_fixed(self) -> bool:
        return self.window is not None


@dataclass(frozen=True, slots=True)
class ItineraryStop:
    meeting_id: str
    window: TimeWindow
    was_flexible: bool
    location: Optional[Location] = None
    priority: Optional[str] = None
    title: Optional[str] = None


@dataclass(slots=True)
class ItineraryPlan:
    stops: list[ItineraryStop] = field(default_factory=list)
    total_distance_miles: float = 0.0
    total_travel_minutes: int = 0
    warnings: list[str] = field(default_factory=list)
