from __future__ import annotations

from src.staffing_planner.staffing_planner.common.time_utils import hhmm_to_minutes, minutes_to_hhmm
from src.staffing_planner.staffing_planner.rosters.generator import _break_schedule, generate_shifts
from src.staffing_planner.staffing_planner.zones.model import Province


def _province(start: int, end: int, operators: int = 0) -> Province:
    return Province(
        province_id=1,
        name="Alpha",
        zone_id=1,
        work_start_time=start,
        work_end_time=end,
        operators=operators,
    )


def test_staggered_starts_and_break_offsets():
    shifts = generate_shifts(_province(7, 22), 3)

    assert [(s.shift_id, s.start_time, s.end_time, s.duration) for s in shifts] == [
        (1, "07:00", "14:00", 420),
        (2, "07:15", "14:15", 420),
        (3, "07:30", "14:30", 420),
    ]
    assert shifts[0].break_schedule.windows() == (
        "08:24-08:34",
        "09:48-09:58",
        "11:12-11:22",
        "12:36-12:46",
    )
    assert shifts[1].break_schedule.first_break == "08:39-08:49"


def test_no_operators_gives_empty_roster():
    assert generate_shifts(_province(7, 22), 0) == []
    assert generate_shifts(_province(7, 22), -3) == []


def test_starts_past_window_end_are_skipped():
    shifts = generate_shifts(_province(20, 22), 12)

    # offsets of 2h or more start at 22:00 and later
    assert [s.shift_id for s in shifts] == [1, 2, 3, 4, 5, 6, 7, 8]
    assert shifts[-1].start_time == "21:45"


def test_shift_ids_stay_one_based_and_ascending():
    shifts = generate_shifts(_province(7, 9), 10)

    ids = [s.shift_id for s in shifts]
    assert ids == sorted(ids)
    assert ids[0] == 1
    assert len(shifts) == 8


def test_end_and_breaks_wrap_past_midnight():
    shifts = generate_shifts(_province(23, 24), 4)

    last = shifts[-1]
    assert last.start_time == "23:45"
    assert last.end_time == "06:45"
    assert last.break_schedule.first_break == "01:09-01:19"

    for shift in shifts:
        for window in shift.break_schedule.windows():
            start, end = window.split("-")
            assert 0 <= hhmm_to_minutes(start) < 24 * 60
            assert 0 <= hhmm_to_minutes(end) < 24 * 60


def test_late_start_end_time_wraps():
    assert minutes_to_hhmm(23 * 60 + 50 + 420) == "06:50"


def test_custom_shift_duration_spaces_breaks_by_fifths():
    (shift,) = generate_shifts(_province(8, 17), 1, shift_duration=300)

    assert shift.end_time == "13:00"
    assert shift.break_schedule.windows() == (
        "09:00-09:10",
        "10:00-10:10",
        "11:00-11:10",
        "12:00-12:10",
    )


def test_full_day_province():
    shifts = generate_shifts(_province(0, 24), 3)

    assert [s.start_time for s in shifts] == ["00:00", "00:15", "00:30"]


def test_generation_is_deterministic():
    province = _province(7, 22)

    assert generate_shifts(province, 12) == generate_shifts(province, 12)


def test_breaks_for_late_start_stay_on_the_clock():
    schedule = _break_schedule(23 * 60 + 50, 420)

    assert schedule.windows() == ("01:14-01:24", "02:38-02:48", "04:02-04:12", "05:26-05:36")
