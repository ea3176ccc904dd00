from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Optional, Sequence

from ..call_volumes.service import CallVolumeService
from ..common.time_utils import today_local
from ..common.validators import require_day_type, require_int
from ..core.constants import (
    DEFAULT_PLANNING_END_HOUR,
    DEFAULT_PLANNING_START_HOUR,
    OPERATORS_PER_BREAK_BLOCK,
)
from ..core.exceptions import NotFoundError
from ..parameters.model import SystemParameters
from ..parameters.service import ParameterService
from ..rosters.generator import generate_shifts
from ..rosters.queries import active_shifts, is_on_break_during_hour
from ..zones.model import Province
from ..zones.service import ZoneService
from .calculator.base import DistributionCalculator
from .calculator.proportional_calculator import ProportionalDistributionCalculator
from .model import DistributionPeriod, DistributionPlan, PersonnelDistributionRecord, ProvinceDistribution
from .repository import DistributionRepository

logger = logging.getLogger(__name__)


def planning_hours(provinces: Sequence[Province]) -> range:
    """Hours covered by the distribution table for a zone.

    Spans the union of the provinces' working windows; a zone without
    provinces falls back to the default day.
    """

    if not provinces:
        return range(DEFAULT_PLANNING_START_HOUR, DEFAULT_PLANNING_END_HOUR)
    start = max(0, min(p.work_start_time for p in provinces))
    end = min(24, max(p.work_end_time for p in provinces))
    return range(start, end)


def break_time_estimate(operators: int, parameters: SystemParameters) -> int:
    return (operators // OPERATORS_PER_BREAK_BLOCK) * parameters.standard_break_time


class PlanningService:
    """Use case: calculate, adjust, save a zone's hourly operator distribution."""

    def __init__(
        self,
        zones: ZoneService,
        call_volumes: CallVolumeService,
        parameters: ParameterService,
        distributions: DistributionRepository,
        *,
        calculator: Optional[DistributionCalculator] = None,
    ):
        self._zones = zones
        self._call_volumes = call_volumes
        self._parameters = parameters
        self._distributions = distributions
        self._calculator = calculator or ProportionalDistributionCalculator()

    def calculate(self, *, zone_id: Any, day_type: Any) -> DistributionPlan:
        zone_id = require_int(zone_id, "Zone", minimum=1)
        day_type = require_day_type(day_type)

        zone = self._zones.get_with_provinces(zone_id)
        parameters = self._parameters.get()
        volumes = {p.hour: p.volume for p in self._call_volumes.hourly_series(zone_id=zone_id, day_type=day_type)}

        rosters = {
            p.province_id: tuple(generate_shifts(p, p.operators, parameters.attendance_duration))
            for p in zone.provinces
        }

        periods = []
        for hour in planning_hours(zone.provinces):
            volume = volumes.get(hour, 0)
            needed = self._calculator.operators_needed(volume, parameters.average_response_rate)
            assigned = self._calculator.distribute(needed, zone.provinces, {hour})

            provinces = tuple(
                self._province_distribution(p, hour, assigned.get(p.province_id, 0), rosters[p.province_id], parameters)
                for p in zone.provinces
            )
            periods.append(
                DistributionPeriod(hour=hour, total_call_volume=volume, operators_needed=needed, provinces=provinces)
            )

        plan = DistributionPlan(
            zone=zone,
            day_type=day_type,
            parameters=parameters,
            periods=tuple(periods),
            rosters=rosters,
        )
        logger.info(
            "distribution calculated for zone %s (%s): %s hours, %s rostered operators",
            zone.zone_id,
            day_type.value,
            len(periods),
            sum(len(r) for r in rosters.values()),
        )
        return plan

    def adjust(self, plan: DistributionPlan, *, hour: Any, province_id: Any, change: Any) -> DistributionPlan:
        """Return a new plan with one province-hour count moved by ``change``.

        The count is clamped to ``[0, province headcount]`` and the active
        shifts are re-selected from the existing roster; ``plan`` itself is
        left untouched.
        """

        hour = require_int(hour, "Hour", minimum=0, maximum=23)
        province_id = require_int(province_id, "Province")
        change = require_int(change, "Change")

        period = plan.period_for(hour)
        if period is None:
            raise NotFoundError(f"Hour {hour} is not part of this plan")
        province = next((p for p in plan.zone.provinces if p.province_id == province_id), None)
        if province is None:
            raise NotFoundError("Province not found in this zone")

        current = next(d for d in period.provinces if d.province_id == province_id)
        operators = max(0, min(current.operators + change, province.operators))

        updated = self._province_distribution(
            province, hour, operators, plan.roster_for(province_id), plan.parameters
        )
        new_period = replace(
            period,
            provinces=tuple(updated if d.province_id == province_id else d for d in period.provinces),
        )
        return replace(
            plan,
            periods=tuple(new_period if p.hour == hour else p for p in plan.periods),
        )

    def build_records(self, plan: DistributionPlan, *, on_date: date) -> list[PersonnelDistributionRecord]:
        """Rows to persist; province-hours without operators are skipped."""

        return [
            PersonnelDistributionRecord(
                zone_id=plan.zone.zone_id,
                province_id=d.province_id,
                day_type=plan.day_type,
                on_date=on_date,
                hour=period.hour,
                operators=d.operators,
                break_time=d.break_time,
                shifts=d.operator_shifts,
            )
            for period in plan.periods
            for d in period.provinces
            if d.operators > 0
        ]

    def save(self, plan: DistributionPlan, *, on_date: Optional[date] = None) -> int:
        records = self.build_records(plan, on_date=on_date or today_local())
        stored = self._distributions.replace(zone_id=plan.zone.zone_id, day_type=plan.day_type, records=records)
        logger.info("distribution saved for zone %s (%s): %s rows", plan.zone.zone_id, plan.day_type.value, stored)
        return stored

    def list_saved(self, *, zone_id: Any, day_type: Any) -> Sequence[dict]:
        return self._distributions.list_saved(
            zone_id=require_int(zone_id, "Zone", minimum=1),
            day_type=require_day_type(day_type),
        )

    def break_view(self, plan: DistributionPlan, *, hour: Any) -> list[dict]:
        """Per province, the selected shifts that take a break during ``hour``."""

        hour = require_int(hour, "Hour", minimum=0, maximum=23)
        period = plan.period_for(hour)
        if period is None:
            raise NotFoundError(f"Hour {hour} is not part of this plan")

        return [
            {
                "provinceId": d.province_id,
                "provinceName": d.province_name,
                "onBreak": [s.to_dict() for s in d.operator_shifts if is_on_break_during_hour(s, hour)],
            }
            for d in period.provinces
        ]

    @staticmethod
    def _province_distribution(
        province: Province,
        hour: int,
        operators: int,
        roster: Sequence,
        parameters: SystemParameters,
    ) -> ProvinceDistribution:
        return ProvinceDistribution(
            province_id=province.province_id,
            province_name=province.name,
            operators=operators,
            break_time=break_time_estimate(operators, parameters),
            operator_shifts=tuple(active_shifts(roster, hour, operators)),
        )
