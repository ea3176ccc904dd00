from __future__ import annotations

from typing import Iterable

from ..common.time_utils import hhmm_to_minutes, parse_time
from .model import OperatorShift


def is_active_during_hour(shift: OperatorShift, hour: int) -> bool:
    """Whether the shift covers ``hour`` at hour granularity.

    The start minute is ignored (a 07:45 start is active at 7); the end hour
    is exclusive. Shifts that run past midnight cover both sides of it.
    """

    start_hour, _ = parse_time(shift.start_time)
    end_hour, _ = parse_time(shift.end_time)

    if hhmm_to_minutes(shift.end_time) > hhmm_to_minutes(shift.start_time):
        return start_hour <= hour < end_hour
    return hour >= start_hour or hour < end_hour


def is_on_break_during_hour(shift: OperatorShift, hour: int) -> bool:
    """A break counts for the hour it starts in, even if it runs into the next."""

    for window in shift.break_schedule.windows():
        start, _ = window.split("-")
        if parse_time(start)[0] == hour:
            return True
    return False


def active_shifts(roster: Iterable[OperatorShift], hour: int, limit: int) -> list[OperatorShift]:
    """First ``limit`` shifts of the roster that are active during ``hour``."""

    if limit <= 0:
        return []
    selected = [shift for shift in roster if is_active_during_hour(shift, hour)]
    return selected[:limit]
