from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Province:
    """Domain entity: a staffing unit with its own working window and headcount.

    The working window is ``[work_start_time, work_end_time)`` in whole hours;
    ``(0, 24)`` means the province is staffed around the clock.
    """

    province_id: int
    name: str
    zone_id: int
    work_start_time: int
    work_end_time: int
    operators: int
    zone_name: Optional[str] = None

    @property
    def is_full_day(self) -> bool:
        return self.work_start_time == 0 and self.work_end_time == 24


@dataclass(frozen=True)
class Zone:
    """Domain entity: a group of provinces sharing one call queue."""

    zone_id: int
    name: str
    description: str = ""
    provinces: tuple[Province, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ZoneSummary:
    """Read-model for the zones list (with aggregate counts)."""

    zone_id: int
    name: str
    description: str
    province_count: int
    operator_count: int


def working_hours_label(province: Province) -> str:
    if province.is_full_day:
        return "24 hours"
    return f"{province.work_start_time}-{province.work_end_time}"
