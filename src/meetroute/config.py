"""Application configuration and settings management."""

from typing import Any

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="MEETROUTE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Meeting Itinerary Optimizer API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Root logging level for the API process.")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    day_start: str = Field(
        default="08:00",
        description="Clock time the walk starts from when no fixed meeting anchors the day.",
    )
    flexible_meeting_minutes: int = Field(default=60, ge=1)
    min_gap_minutes: int = Field(
        default=30,
        ge=0,
        description="A gap before a fixed meeting must be strictly longer than this to receive insertions.",
    )
    pre_fixed_buffer_minutes: int = Field(default=15, ge=0)
    post_fixed_buffer_minutes: int = Field(default=15, ge=0)
    gap_fill_margin_minutes: int = Field(
        default=15,
        ge=0,
        description="Slack a gap must still have after one more flexible meeting before another insertion is tried.",
    )
    average_speed_mph: float = Field(
        default=30.0,
        gt=0.0,
        description="Constant average travel speed used to turn distance into travel time.",
    )
    earth_radius_miles: float = Field(default=3959.0, gt=0.0)
    next_fixed_weight: float = Field(
        default=0.5,
        ge=0.0,
        description="Weight of the distance to the upcoming fixed meeting in insertion scores.",
    )
    reject_fixed_conflicts: bool = Field(
        default=False,
        description="Raise instead of warning when two fixed meetings overlap.",
    )

    @field_validator("day_start")
    @classmethod
    def _validate_day_start(cls, value: str) -> str:
        from .services.itinerary.clock import parse_clock

        parse_clock(value)
        return value

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
