from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import (
    DEFAULT_ATTENDANCE_DURATION,
    DEFAULT_AVERAGE_RESPONSE_RATE,
    DEFAULT_STANDARD_BREAK_TIME,
)


@dataclass(frozen=True)
class SystemParameters:
    """Global tuning values injected into the planner.

    attendance_duration: minutes an operator is present per shift.
    standard_break_time: minutes of break granted per block of operators.
    average_response_rate: calls one operator handles per hour.
    """

    attendance_duration: int = DEFAULT_ATTENDANCE_DURATION
    standard_break_time: int = DEFAULT_STANDARD_BREAK_TIME
    average_response_rate: int = DEFAULT_AVERAGE_RESPONSE_RATE
    parameters_id: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.parameters_id,
            "attendance_duration": self.attendance_duration,
            "standard_break_time": self.standard_break_time,
            "average_response_rate": self.average_response_rate,
        }
