from __future__ import annotations

import pytest

from src.staffing_planner.staffing_planner.rosters.generator import generate_shifts
from src.staffing_planner.staffing_planner.rosters.model import BreakSchedule, OperatorShift
from src.staffing_planner.staffing_planner.rosters.queries import (
    active_shifts,
    is_active_during_hour,
    is_on_break_during_hour,
)
from src.staffing_planner.staffing_planner.zones.model import Province


def _shift(start: str, end: str, shift_id: int = 1) -> OperatorShift:
    return OperatorShift(
        shift_id=shift_id,
        start_time=start,
        end_time=end,
        duration=420,
        break_schedule=BreakSchedule("00:00-00:10", "00:00-00:10", "00:00-00:10", "00:00-00:10"),
    )


@pytest.mark.parametrize("hour, expected", [(6, False), (7, True), (13, True), (14, False)])
def test_active_hour_ignores_start_minute(hour, expected):
    assert is_active_during_hour(_shift("07:45", "14:45"), hour) is expected


@pytest.mark.parametrize("hour, expected", [(19, False), (20, True), (23, True), (0, True), (2, True), (3, False)])
def test_active_hour_across_midnight(hour, expected):
    assert is_active_during_hour(_shift("20:00", "03:00"), hour) is expected


def test_break_counts_for_the_hour_it_starts_in():
    province = Province(1, "Alpha", 1, 7, 22, 1)
    (shift,) = generate_shifts(province, 1)

    hours_on_break = [h for h in range(24) if is_on_break_during_hour(shift, h)]

    assert hours_on_break == [8, 9, 11, 12]


def test_active_shifts_keeps_roster_order_and_truncates():
    province = Province(1, "Alpha", 1, 7, 22, 6)
    roster = generate_shifts(province, 6)

    # at 14:00 only the shifts ending at 15:00 and later are still on
    assert [s.shift_id for s in active_shifts(roster, 14, 10)] == [5, 6]
    assert [s.shift_id for s in active_shifts(roster, 9, 3)] == [1, 2, 3]
    assert active_shifts(roster, 9, 0) == []
    assert active_shifts(roster, 3, 5) == []
