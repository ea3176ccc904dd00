from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..common.time_utils import hour_label
from ..core.enums import DayType
from ..parameters.model import SystemParameters
from ..rosters.model import OperatorShift
from ..zones.model import Zone


@dataclass(frozen=True)
class ProvinceDistribution:
    """Staffing of one province during one hour."""

    province_id: int
    province_name: str
    operators: int
    break_time: int
    operator_shifts: tuple[OperatorShift, ...] = ()

    def to_dict(self) -> dict:
        return {
            "provinceId": self.province_id,
            "provinceName": self.province_name,
            "operators": self.operators,
            "breakTime": self.break_time,
            "operatorShifts": [s.to_dict() for s in self.operator_shifts],
        }


@dataclass(frozen=True)
class DistributionPeriod:
    """One hour of the planning day."""

    hour: int
    total_call_volume: int
    operators_needed: int
    provinces: tuple[ProvinceDistribution, ...] = ()

    @property
    def label(self) -> str:
        return hour_label(self.hour)

    def to_dict(self) -> dict:
        return {
            "hour": self.hour,
            "label": self.label,
            "totalCallVolume": self.total_call_volume,
            "operatorsNeeded": self.operators_needed,
            "provinces": [p.to_dict() for p in self.provinces],
        }


@dataclass(frozen=True)
class DistributionPlan:
    """Result of one calculation for a (zone, day type).

    ``rosters`` holds the full generated shift list per province; periods only
    ever reference subsets of it.
    """

    zone: Zone
    day_type: DayType
    parameters: SystemParameters
    periods: tuple[DistributionPeriod, ...]
    rosters: dict = field(default_factory=dict)

    def period_for(self, hour: int) -> Optional[DistributionPeriod]:
        for period in self.periods:
            if period.hour == hour:
                return period
        return None

    def roster_for(self, province_id: int) -> tuple[OperatorShift, ...]:
        return tuple(self.rosters.get(province_id, ()))

    def to_dict(self) -> dict:
        return {
            "zone": {"id": self.zone.zone_id, "name": self.zone.name},
            "dayType": self.day_type.value,
            "parameters": self.parameters.to_dict(),
            "periods": [p.to_dict() for p in self.periods],
            "rosters": {
                str(province.province_id): [s.to_dict() for s in self.roster_for(province.province_id)]
                for province in self.zone.provinces
            },
        }


@dataclass(frozen=True)
class PersonnelDistributionRecord:
    """Row persisted for one (zone, province, day type, date, hour)."""

    zone_id: int
    province_id: int
    day_type: DayType
    on_date: date
    hour: int
    operators: int
    break_time: int
    shifts: tuple[OperatorShift, ...] = ()

    @property
    def breaks_data(self) -> str:
        return json.dumps(
            {
                "shifts": [
                    {
                        "shiftId": s.shift_id,
                        "startTime": s.start_time,
                        "endTime": s.end_time,
                        "breaks": list(s.break_schedule.windows()),
                    }
                    for s in self.shifts
                ]
            }
        )
