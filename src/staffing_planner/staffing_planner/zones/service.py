from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional, Sequence

from ..common.validators import require_int, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Province, Zone, ZoneSummary
from .repository import ProvinceRepository, ZoneRepository

logger = logging.getLogger(__name__)


class ZoneService:
    """Use case: manage zones (admin)."""

    def __init__(self, zones: ZoneRepository, provinces: ProvinceRepository):
        self._zones = zones
        self._provinces = provinces

    def list_with_counts(self) -> Sequence[ZoneSummary]:
        return self._zones.list_summaries()

    def get_with_provinces(self, zone_id: int) -> Zone:
        zone = self._zones.get_by_id(int(zone_id))
        if not zone:
            raise NotFoundError("Zone not found")
        return replace(zone, provinces=tuple(self._provinces.list_for_zone(zone.zone_id)))

    def create(self, *, name: str, description: Optional[str] = None) -> int:
        name = require_non_empty(name, "Zone name")
        zone_id = self._zones.create(name=name, description=(description or "").strip())
        logger.info("created zone %s (%s)", zone_id, name)
        return zone_id

    def delete(self, zone_id: int) -> None:
        if not self._zones.delete(int(zone_id)):
            raise NotFoundError("Zone not found")
        logger.info("deleted zone %s", zone_id)


class ProvinceService:
    """Use case: manage provinces and their working windows (admin)."""

    def __init__(self, provinces: ProvinceRepository, zones: ZoneRepository):
        self._provinces = provinces
        self._zones = zones

    def list_all(self) -> Sequence[Province]:
        return self._provinces.list_all()

    def create(
        self,
        *,
        name: str,
        zone_id: Any,
        work_start_time: Any,
        work_end_time: Any,
        operators: Any,
    ) -> int:
        name = require_non_empty(name, "Province name")
        zone_id = require_int(zone_id, "Zone", minimum=1)
        start = require_int(work_start_time, "Work start time", minimum=0, maximum=24)
        end = require_int(work_end_time, "Work end time", minimum=0, maximum=24)
        operators = require_int(operators, "Operators", minimum=0)

        if start >= end:
            raise ValidationError("Work start time must be before work end time")
        if not self._zones.get_by_id(zone_id):
            raise NotFoundError("Zone not found")

        province_id = self._provinces.create(
            name=name,
            zone_id=zone_id,
            work_start_time=start,
            work_end_time=end,
            operators=operators,
        )
        logger.info("created province %s (%s) in zone %s", province_id, name, zone_id)
        return province_id

    def delete(self, province_id: int) -> None:
        if not self._provinces.delete(int(province_id)):
            raise NotFoundError("Province not found")
