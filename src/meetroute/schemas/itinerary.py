"""Itinerary request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator


class MeetingPayload(BaseModel):
    id: str
    title: Optional[str] = None
    start_time: Optional[str] = Field(default=None, description="Start time as HH:MM; required unless flexible.")
    end_time: Optional[str] = Field(default=None, description="End time as HH:MM; required unless flexible.")
    flexible_time: bool = Field(
        default=False,
        description="If True the optimizer chooses when this meeting happens.",
    )
    type: Literal["in-person", "virtual", "phone"] = "in-person"
    status: Literal["scheduled", "completed", "cancelled", "in-progress"] = "scheduled"
    priority: Literal["low", "medium", "high"] = "medium"
    latitude: Optional[float] = Field(default=None, allow_inf_nan=False, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, allow_inf_nan=False, ge=-180, le=180)

    @model_validator(mode="after")
    def _check_consistency(self) -> "MeetingPayload":
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be provided together")
        if not self.flexible_time and (self.start_time is None or self.end_time is None):
            raise ValueError("fixed meetings require start_time and end_time")
        return self


class ItineraryRequest(BaseModel):
    meetings: List[MeetingPayload] = Field(default_factory=list)
    day_start: Optional[str] = Field(
        default=None,
        description="Clock time (HH:MM) to start from when no fixed meeting anchors the day.",
    )


class ItineraryStopModel(BaseModel):
    sequence: int
    id: str
    title: Optional[str] = None
    start_time: str
    end_time: str
    start_minutes: int
    end_minutes: int
    was_flexible: bool
    priority: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class TimeUpdateModel(BaseModel):
    id: str
    start_time: str
    end_time: str


class ItineraryResponse(BaseModel):
    stops: List[ItineraryStopModel]
    total_distance_miles: float
    total_travel_minutes: int
    warnings: List[str] = Field(default_factory=list)
    excluded_meeting_ids: List[str] = Field(default_factory=list)
    time_updates: List[TimeUpdateModel] = Field(default_factory=list)
