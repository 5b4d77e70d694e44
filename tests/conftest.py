import pytest

from meetroute.services.itinerary.models import OptimizerParameters


@pytest.fixture
def parameters() -> OptimizerParameters:
    return OptimizerParameters(
        day_start_minutes=480,
        flexible_meeting_minutes=60,
        min_gap_minutes=30,
        pre_fixed_buffer_minutes=15,
        post_fixed_buffer_minutes=15,
        gap_fill_margin_minutes=15,
        average_speed_mph=30.0,
        earth_radius_miles=3959.0,
        next_fixed_weight=0.5,
        reject_fixed_conflicts=False,
    )
