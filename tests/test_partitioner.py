from meetroute.services.itinerary.partitioner import partition

from helpers import fixed, flexible


def test_partition_splits_and_sorts_fixed():
    meetings = [
        flexible("X", 0, 0),
        fixed("late", "14:00", "15:00"),
        fixed("early", "09:00", "10:00"),
        flexible("Y"),
    ]

    fixed_meetings, flexible_meetings = partition(meetings)

    assert [m.meeting_id for m in fixed_meetings] == ["early", "late"]
    assert [m.meeting_id for m in flexible_meetings] == ["X", "Y"]


def test_partition_sort_is_stable_for_equal_starts():
    meetings = [fixed("b", "09:00", "09:30"), fixed("a", "09:00", "10:00"), fixed("c", "08:00", "08:30")]

    fixed_meetings, _ = partition(meetings)

    assert [m.meeting_id for m in fixed_meetings] == ["c", "b", "a"]


def test_partition_does_not_mutate_input():
    meetings = [fixed("late", "14:00", "15:00"), fixed("early", "09:00", "10:00")]
    partition(meetings)
    assert [m.meeting_id for m in meetings] == ["late", "early"]
