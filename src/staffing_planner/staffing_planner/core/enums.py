from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role of an account allowed into the planner."""

    ADMIN = "admin"


class DayType(str, Enum):
    """Partition of call-volume data (and of saved distributions)."""

    REGULAR = "regular"
    HOLIDAY = "holiday"

    @property
    def label(self) -> str:
        return "Regular Days" if self is DayType.REGULAR else "Holiday Days"
