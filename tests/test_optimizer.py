import random
from dataclasses import replace

import pytest

from meetroute.models.domain import MeetingCandidate
from meetroute.services.geospatial import leg_miles, travel_minutes
from meetroute.services.itinerary.errors import FixedMeetingConflict, InvalidTimeWindow
from meetroute.services.itinerary.optimizer import optimize_itinerary
from meetroute.services.itinerary.scoring import WeightedDistanceScorer

from helpers import fixed, flexible


def _ids(plan):
    return [stop.meeting_id for stop in plan.stops]


def _window(plan, meeting_id):
    stop = next(s for s in plan.stops if s.meeting_id == meeting_id)
    return stop.window.start_minutes, stop.window.end_minutes


def test_empty_input_returns_empty_plan(parameters):
    plan = optimize_itinerary([], parameters=parameters)

    assert plan.stops == []
    assert plan.total_distance_miles == 0
    assert plan.total_travel_minutes == 0
    assert plan.warnings == []


def test_single_fixed_meeting_is_returned_unchanged(parameters):
    plan = optimize_itinerary([fixed("F", "13:00", "14:00", 1, 1)], parameters=parameters)

    assert _ids(plan) == ["F"]
    assert _window(plan, "F") == (780, 840)
    assert plan.stops[0].was_flexible is False
    assert plan.total_distance_miles == 0


def test_single_flexible_meeting_starts_at_day_start(parameters):
    plan = optimize_itinerary([flexible("X", 1, 1)], parameters=parameters)

    assert _window(plan, "X") == (480, 540)
    assert plan.total_distance_miles == 0


def test_flexible_meeting_fits_before_fixed_meeting(parameters):
    meetings = [fixed("F", "10:00", "11:00", 37.77, -122.42), flexible("X", 37.78, -122.41)]

    plan = optimize_itinerary(meetings, parameters=parameters)

    assert _ids(plan) == ["X", "F"]
    assert _window(plan, "X") == (480, 540)
    assert _window(plan, "F") == (600, 660)
    assert plan.total_distance_miles == pytest.approx(0.88, abs=0.01)
    assert plan.total_travel_minutes == 2


def test_flexible_meeting_goes_after_fixed_when_gap_is_too_short(parameters):
    meetings = [fixed("F", "08:30", "09:30", 37.77, -122.42), flexible("X", 37.78, -122.41)]

    plan = optimize_itinerary(meetings, parameters=parameters)

    assert _ids(plan) == ["F", "X"]
    # 15 minute buffer after 09:30 plus 2 minutes of travel
    assert _window(plan, "X") == (587, 647)


def test_flexible_only_day_uses_nearest_neighbour(parameters):
    meetings = [flexible("A", 0, 0), flexible("C", 0, 10), flexible("B", 0, 1)]

    plan = optimize_itinerary(meetings, parameters=parameters)

    assert _ids(plan) == ["A", "B", "C"]
    assert _window(plan, "B") == (678, 738)
    assert _window(plan, "C") == (1982, 2042)
    assert plan.total_distance_miles == pytest.approx(690.98, abs=0.01)
    assert plan.total_travel_minutes == 1382


def test_placements_past_midnight_are_reported(parameters):
    meetings = [flexible("A", 0, 0), flexible("C", 0, 10), flexible("B", 0, 1)]

    plan = optimize_itinerary(meetings, parameters=parameters)

    assert len(plan.warnings) == 1
    assert "C" in plan.warnings[0]
    assert "34:02" in plan.warnings[0]


def test_overlapping_fixed_meetings_are_preserved(parameters):
    meetings = [fixed("F2", "10:00", "11:00", 0, 0.1), fixed("F1", "09:00", "10:30", 0, 0)]

    plan = optimize_itinerary(meetings, parameters=parameters)

    assert _ids(plan) == ["F1", "F2"]
    assert _window(plan, "F1") == (540, 630)
    assert _window(plan, "F2") == (600, 660)
    assert len(plan.warnings) == 1
    assert "F2" in plan.warnings[0] and "F1" in plan.warnings[0]


def test_overlap_detected_against_longest_earlier_meeting(parameters):
    meetings = [
        fixed("long", "09:00", "12:00"),
        fixed("short", "09:30", "10:00"),
        fixed("late", "11:00", "11:30"),
    ]

    plan = optimize_itinerary(meetings, parameters=parameters)

    assert len(plan.warnings) == 2


def test_overlapping_fixed_meetings_rejected_when_configured(parameters):
    meetings = [fixed("F1", "09:00", "10:30"), fixed("F2", "10:00", "11:00")]

    with pytest.raises(FixedMeetingConflict) as excinfo:
        optimize_itinerary(meetings, parameters=replace(parameters, reject_fixed_conflicts=True))

    assert (excinfo.value.first_id, excinfo.value.second_id) == ("F1", "F2")


def test_unlocated_flexible_meeting_is_placed_last(parameters):
    meetings = [flexible("U"), flexible("L1", 0, 0), flexible("L2", 0, 0.1)]

    plan = optimize_itinerary(meetings, parameters=parameters)

    assert _ids(plan) == ["L1", "L2", "U"]
    assert _window(plan, "U") == (614, 674)
    assert plan.total_distance_miles == pytest.approx(6.91, abs=0.01)
    assert plan.total_travel_minutes == 14


def test_all_fixed_returns_sorted_input(parameters):
    meetings = [fixed("B", "13:00", "14:00", 0, 1), fixed("A", "09:00", "10:00", 0, 0)]

    plan = optimize_itinerary(meetings, parameters=parameters)

    assert _ids(plan) == ["A", "B"]
    assert not any(stop.was_flexible for stop in plan.stops)
    assert plan.total_distance_miles == pytest.approx(69.1, abs=0.01)


def test_day_start_override(parameters):
    plan = optimize_itinerary([flexible("X", 0, 0)], day_start=540, parameters=parameters)

    assert _window(plan, "X") == (540, 600)


def test_leftovers_follow_last_fixed_meeting(parameters):
    meetings = [
        fixed("F", "08:30", "09:00", 0, 0),
        flexible("far", 0, 0.2),
        flexible("near", 0, 0.1),
    ]

    plan = optimize_itinerary(meetings, parameters=parameters)

    assert _ids(plan) == ["F", "near", "far"]
    assert _window(plan, "near") == (569, 629)


def test_custom_scorer_changes_gap_choice(parameters):
    class TowardNextOnly:
        def score(self, dist_from_current, dist_to_next_fixed):
            return dist_to_next_fixed

    meetings = [
        fixed("start", "08:00", "08:30", 0, 0),
        fixed("end", "12:00", "13:00", 0, 0.3),
        flexible("home", 0, 0.01),
        flexible("toward_end", 0, 0.25),
    ]

    default_plan = optimize_itinerary(meetings, parameters=parameters)
    custom_plan = optimize_itinerary(meetings, parameters=parameters, scorer=TowardNextOnly())

    assert _ids(default_plan)[1] == "home"
    assert _ids(custom_plan)[1] == "toward_end"


def _random_day(rng: random.Random) -> list[MeetingCandidate]:
    meetings: list[MeetingCandidate] = []
    hour = 8 + rng.randint(0, 2)
    for idx in range(rng.randint(0, 4)):
        hour += rng.randint(1, 3)
        if hour > 20:
            break
        lat, lon = 37.6 + rng.random() * 0.4, -122.6 + rng.random() * 0.4
        meetings.append(fixed(f"fixed-{idx}", f"{hour:02d}:00", f"{hour:02d}:45", lat, lon))
    for idx in range(rng.randint(0, 8)):
        if rng.random() < 0.15:
            meetings.append(flexible(f"flex-{idx}"))
        else:
            meetings.append(flexible(f"flex-{idx}", 37.6 + rng.random() * 0.4, -122.6 + rng.random() * 0.4))
    rng.shuffle(meetings)
    return meetings


@pytest.mark.parametrize("seed", range(25))
def test_plan_properties_hold_for_random_days(seed, parameters):
    meetings = _random_day(random.Random(seed))

    plan = optimize_itinerary(meetings, parameters=parameters)

    # determinism
    assert optimize_itinerary(meetings, parameters=parameters) == plan

    # count conservation
    assert sorted(_ids(plan)) == sorted(m.meeting_id for m in meetings)

    # fixed windows untouched
    by_id = {m.meeting_id: m for m in meetings}
    for stop in plan.stops:
        if not stop.was_flexible:
            assert stop.window == by_id[stop.meeting_id].window

    # no overlap between consecutive stops
    for current, following in zip(plan.stops, plan.stops[1:]):
        assert current.window.end_minutes <= following.window.start_minutes

    # gap placements leave time to reach the next fixed meeting
    for idx, stop in enumerate(plan.stops):
        if not stop.was_flexible:
            continue
        next_fixed = next((s for s in plan.stops[idx + 1:] if not s.was_flexible), None)
        if next_fixed is None:
            continue
        travel = travel_minutes(leg_miles(stop.location, next_fixed.location))
        assert stop.window.end_minutes + travel <= next_fixed.window.start_minutes

    assert plan.total_distance_miles >= 0
    located = [s for s in plan.stops if s.location is not None]
    if len(located) <= 1:
        assert plan.total_distance_miles == 0


def test_default_scorer_weights_onward_leg_by_half():
    assert WeightedDistanceScorer().score(10, 4) == 12
    assert WeightedDistanceScorer(next_fixed_weight=1.0).score(10, 4) == 14


def test_non_finite_coordinates_do_not_break_the_plan(parameters):
    meetings = [flexible("A", float("nan"), 0), flexible("B", 0, 1)]

    plan = optimize_itinerary(meetings, parameters=parameters)

    assert _ids(plan) == ["B", "A"]
    assert plan.total_distance_miles == 0
    assert plan.total_travel_minutes == 0


def test_fixed_meeting_with_non_finite_location_still_anchors_the_walk(parameters):
    meetings = [fixed("F", "09:00", "10:00", float("nan"), 0), flexible("X", 0, 0), flexible("Y", 0, 0.1)]

    plan = optimize_itinerary(meetings, parameters=parameters)

    assert sorted(_ids(plan)) == ["F", "X", "Y"]
    assert _window(plan, "F") == (540, 600)


def test_fixed_meeting_ending_before_it_starts_is_rejected(parameters):
    with pytest.raises(InvalidTimeWindow) as excinfo:
        optimize_itinerary([fixed("F", "11:00", "10:00"), flexible("X", 0, 0)], parameters=parameters)

    assert excinfo.value.meeting_id == "F"
