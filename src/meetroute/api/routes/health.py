"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...config import settings

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/settings", status_code=status.HTTP_200_OK)
def health_settings() -> dict:
    """Optimizer tuning currently in effect."""
    return {
        "day_start": settings.day_start,
        "flexible_meeting_minutes": settings.flexible_meeting_minutes,
        "average_speed_mph": settings.average_speed_mph,
        "next_fixed_weight": settings.next_fixed_weight,
        "reject_fixed_conflicts": settings.reject_fixed_conflicts,
    }
