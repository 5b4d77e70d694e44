from meetroute.models.domain import Location, MeetingCandidate, TimeWindow
from meetroute.services.itinerary.clock import parse_clock


def fixed(meeting_id: str, start: str, end: str, lat: float | None = None, lon: float | None = None) -> MeetingCandidate:
    return MeetingCandidate(
        meeting_id=meeting_id,
        window=TimeWindow(parse_clock(start), parse_clock(end)),
        location=Location(lat, lon) if lat is not None else None,
    )


def flexible(meeting_id: str, lat: float | None = None, lon: float | None = None) -> MeetingCandidate:
    return MeetingCandidate(
        meeting_id=meeting_id,
        location=Location(lat, lon) if lat is not None else None,
    )
