"""Itinerary orchestration service."""

from __future__ import annotations

import logging
from typing import Sequence

from ...models.domain import ItineraryPlan, ItineraryStop, Location, MeetingCandidate, TimeWindow
from ...schemas.itinerary import (
    ItineraryRequest,
    ItineraryResponse,
    ItineraryStopModel,
    MeetingPayload,
    TimeUpdateModel,
)
from .clock import format_clock, parse_clock
from .models import OptimizerParameters
from .optimizer import optimize_itinerary
from .updates import optimized_time_updates

logger = logging.getLogger(__name__)


def _is_eligible(meeting: MeetingPayload) -> bool:
    return meeting.type == "in-person" and meeting.status != "cancelled"


def _to_candidate(meeting: MeetingPayload) -> MeetingCandidate:
    location = None
    if meeting.latitude is not None and meeting.longitude is not None:
        location = Location(latitude=meeting.latitude, longitude=meeting.longitude)

    window = None
    if not meeting.flexible_time:
        window = TimeWindow(parse_clock(meeting.start_time), parse_clock(meeting.end_time))

    return MeetingCandidate(
        meeting_id=meeting.id,
        window=window,
        location=location,
        priority=meeting.priority,
        title=meeting.title,
    )


def build_candidates(meetings: Sequence[MeetingPayload]) -> tuple[list[MeetingCandidate], list[str]]:
    """Convert eligible payloads to candidates; return them with the ids left out."""
    candidates: list[MeetingCandidate] = []
    excluded: list[str] = []
    for meeting in meetings:
        if _is_eligible(meeting):
            candidates.append(_to_candidate(meeting))
        else:
            excluded.append(meeting.id)
    return candidates, excluded


def plan_for_request(payload: ItineraryRequest) -> tuple[ItineraryPlan, list[str]]:
    candidates, excluded = build_candidates(payload.meetings)
    if excluded:
        logger.info("Skipping %d meetings that are not in-person or are cancelled", len(excluded))
    day_start = parse_clock(payload.day_start) if payload.day_start else None
    plan = optimize_itinerary(candidates, day_start=day_start, parameters=OptimizerParameters())
    return plan, excluded


def _stop_model(sequence: int, stop: ItineraryStop) -> ItineraryStopModel:
    return ItineraryStopModel(
        sequence=sequence,
        id=stop.meeting_id,
        title=stop.title,
        start_time=format_clock(stop.window.start_minutes),
        end_time=format_clock(stop.window.end_minutes),
        start_minutes=stop.window.start_minutes,
        end_minutes=stop.window.end_minutes,
        was_flexible=stop.was_flexible,
        priority=stop.priority,
        latitude=stop.location.latitude if stop.location else None,
        longitude=stop.location.longitude if stop.location else None,
    )


def time_update_models(plan: ItineraryPlan) -> list[TimeUpdateModel]:
    return [
        TimeUpdateModel(id=update.meeting_id, start_time=update.start_time, end_time=update.end_time)
        for update in optimized_time_updates(plan)
    ]


def optimize_day(payload: ItineraryRequest) -> ItineraryResponse:
    plan, excluded = plan_for_request(payload)
    return ItineraryResponse(
        stops=[_stop_model(sequence, stop) for sequence, stop in enumerate(plan.stops, start=1)],
        total_distance_miles=round(plan.total_distance_miles, 2),
        total_travel_minutes=plan.total_travel_minutes,
        warnings=plan.warnings,
        excluded_meeting_ids=excluded,
        time_updates=time_update_models(plan),
    )
