"""Itinerary endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...schemas.itinerary import ItineraryRequest, ItineraryResponse, TimeUpdateModel
from ...services.itinerary.errors import ItineraryError
from ...services.itinerary.service import optimize_day, plan_for_request, time_update_models

router = APIRouter(prefix="/itinerary", tags=["itinerary"])

logger = logging.getLogger(__name__)


@router.post("/optimize", response_model=ItineraryResponse, status_code=status.HTTP_200_OK)
def optimize(payload: ItineraryRequest) -> ItineraryResponse:
    try:
        return optimize_day(payload)
    except ItineraryError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error optimizing itinerary: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize itinerary: {str(exc)}"
        ) from exc


@router.post("/time-updates", response_model=list[TimeUpdateModel], status_code=status.HTTP_200_OK)
def time_updates(payload: ItineraryRequest) -> list[TimeUpdateModel]:
    """Optimized start/end times for flexible meetings, for the caller to persist."""
    try:
        plan, _ = plan_for_request(payload)
        return time_update_models(plan)
    except ItineraryError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception(f"Error computing time updates: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to compute time updates: {str(exc)}"
        ) from exc
