from __future__ import annotations

import math
from typing import Collection, Sequence

from .base import DistributionCalculator, StaffedProvince


def _is_working(province: StaffedProvince, active_hours: Collection[int]) -> bool:
    return any(province.work_start_time <= hour < province.work_end_time for hour in active_hours)


class ProportionalDistributionCalculator(DistributionCalculator):
    """Standard rule: share demand by headcount, round up, cap at headcount.

    Demand above total capacity is not met; every working province is then
    staffed with its full headcount. Rounding up can overshoot demand; the
    excess is taken back from the most-staffed provinces first (ties in input
    order), never leaving a staffed province with fewer than one operator.
    """

    def operators_needed(self, call_volume: int, response_rate: float) -> int:
        if response_rate <= 0:
            return 0
        return math.ceil(call_volume / response_rate)

    def distribute(
        self,
        total_needed: int,
        provinces: Sequence[StaffedProvince],
        active_hours: Collection[int],
    ) -> dict:
        working = [p for p in provinces if _is_working(p, active_hours)]
        if not working:
            return {}

        capacity = sum(p.operators for p in working)
        if total_needed >= capacity:
            return {p.province_id: p.operators for p in working}

        distribution = {}
        for p in working:
            share = -(-total_needed * p.operators // capacity)  # ceil without float error
            distribution[p.province_id] = min(share, p.operators)

        assigned = sum(distribution.values())
        if assigned > total_needed:
            # equal counts are reduced in input order
            order = sorted(range(len(working)), key=lambda i: (-distribution[working[i].province_id], i))
            for p in (working[i] for i in order):
                if assigned <= total_needed:
                    break
                reduction = min(assigned - total_needed, distribution[p.province_id] - 1)
                if reduction > 0:
                    distribution[p.province_id] -= reduction
                    assigned -= reduction

        return distribution
