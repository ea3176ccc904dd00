from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BreakSchedule:
    """Four ``HH:MM-HH:MM`` break windows, in shift order."""

    first_break: str
    second_break: str
    third_break: str
    fourth_break: str

    def windows(self) -> tuple[str, str, str, str]:
        return (self.first_break, self.second_break, self.third_break, self.fourth_break)


@dataclass(frozen=True)
class OperatorShift:
    """One operator's working interval plus breaks.

    shift_id is 1-based within the province roster. start_time/end_time are
    ``HH:MM`` clock times; end_time may be earlier than start_time when the
    shift runs past midnight.
    """

    shift_id: int
    start_time: str
    end_time: str
    duration: int
    break_schedule: BreakSchedule

    def to_dict(self) -> dict:
        return {
            "shiftId": self.shift_id,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "duration": self.duration,
            "breakSchedule": {
                "firstBreak": self.break_schedule.first_break,
                "secondBreak": self.break_schedule.second_break,
                "thirdBreak": self.break_schedule.third_break,
                "fourthBreak": self.break_schedule.fourth_break,
            },
        }
