"""Shift and break roster generation.

Every operator of a province gets one fixed-length shift. Start times are
staggered in 15-minute steps from the start of the province's working window;
an operator whose start would fall on or after the end of the window gets no
shift. Each shift carries four 10-minute breaks placed after 1/5, 2/5, 3/5 and
4/5 of the shift. All clock arithmetic wraps at midnight.
"""

from __future__ import annotations

from typing import Protocol

from ..common.time_utils import format_interval, minutes_to_hhmm
from ..core.constants import (
    BREAK_LENGTH_MINUTES,
    BREAKS_PER_SHIFT,
    DEFAULT_ATTENDANCE_DURATION,
    MINUTES_PER_HOUR,
    SHIFT_STAGGER_MINUTES,
)
from .model import BreakSchedule, OperatorShift


class WorkingWindow(Protocol):
    work_start_time: int
    work_end_time: int


def _break_schedule(start_minutes: int, shift_duration: int) -> BreakSchedule:
    interval = shift_duration // (BREAKS_PER_SHIFT + 1)
    windows = [
        format_interval(start_minutes + k * interval, BREAK_LENGTH_MINUTES)
        for k in range(1, BREAKS_PER_SHIFT + 1)
    ]
    return BreakSchedule(*windows)


def generate_shifts(
    province: WorkingWindow,
    operator_count: int,
    shift_duration: int = DEFAULT_ATTENDANCE_DURATION,
) -> list[OperatorShift]:
    """Build the roster for one province.

    Returns at most ``operator_count`` shifts, ordered by shift_id. The same
    inputs always give the same list.
    """

    shifts: list[OperatorShift] = []
    if operator_count <= 0:
        return shifts

    for i in range(operator_count):
        offset = i * SHIFT_STAGGER_MINUTES
        start_hour = province.work_start_time + offset // MINUTES_PER_HOUR
        start_minute = offset % MINUTES_PER_HOUR

        if start_hour >= province.work_end_time:
            continue

        start_minutes = start_hour * MINUTES_PER_HOUR + start_minute
        shifts.append(
            OperatorShift(
                shift_id=i + 1,
                start_time=minutes_to_hhmm(start_minutes),
                end_time=minutes_to_hhmm(start_minutes + shift_duration),
                duration=shift_duration,
                break_schedule=_break_schedule(start_minutes, shift_duration),
            )
        )

    return shifts
