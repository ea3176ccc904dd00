from __future__ import annotations

from dataclasses import dataclass

from ..parameters.model import SystemParameters
from ..parameters.service import ParameterService
from ..zones.model import ZoneSummary
from ..zones.service import ZoneService


@dataclass(frozen=True)
class DashboardStats:
    zone_count: int
    province_count: int
    operator_count: int
    parameters: SystemParameters
    zones: tuple[ZoneSummary, ...]


class DashboardService:
    def __init__(self, zones: ZoneService, parameters: ParameterService):
        self._zones = zones
        self._parameters = parameters

    def stats(self) -> DashboardStats:
        zones = tuple(self._zones.list_with_counts())
        return DashboardStats(
            zone_count=len(zones),
            province_count=sum(z.province_count for z in zones),
            operator_count=sum(z.operator_count for z in zones),
            parameters=self._parameters.get(),
            zones=zones,
        )
