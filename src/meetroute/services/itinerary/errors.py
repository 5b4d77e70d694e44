"""Itinerary optimizer exceptions."""

from __future__ import annotations


class ItineraryError(ValueError):
    """Base class for errors caused by the meetings handed to the optimizer."""


class InvalidTimeFormat(ItineraryError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid time '{value}': expected HH:MM with hour 0-23 and minute 0-59.")
        self.value = value


class FixedMeetingConflict(ItineraryError):
    def __init__(self, first_id: str, second_id: str) -> None:
        super().__init__(f"Fixed meetings '{first_id}' and '{second_id}' overlap.")
        self.first_id = first_id
        self.second_id = second_id


class InvalidTimeWindow(ItineraryError):
    def __init__(self, meeting_id: str, start_minutes: int, end_minutes: int) -> None:
        super().__init__(f"Meeting '{meeting_id}' ends at minute {end_minutes}, before it starts at minute {start_minutes}.")
        self.meeting_id = meeting_id
        self.start_minutes = start_minutes
        self.end_minutes = end_minutes
