from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence, Union

from ..common.validators import require_day_type, require_int
from ..core.exceptions import ValidationError
from .model import CallVolumePoint
from .repository import CallVolumeRepository

logger = logging.getLogger(__name__)

HOURS_PER_DAY = 24


class CallVolumeService:
    """Use case: record hourly call volumes per zone and day type."""

    def __init__(self, volumes: CallVolumeRepository):
        self._volumes = volumes

    def hourly_series(self, *, zone_id: Any, day_type: Any) -> list[CallVolumePoint]:
        """All 24 hours of the day; hours without stored data have volume 0."""

        zone_id = require_int(zone_id, "Zone", minimum=1)
        day_type = require_day_type(day_type)
        by_hour = {p.hour: p.volume for p in self._volumes.list_for(zone_id=zone_id, day_type=day_type)}
        return [
            CallVolumePoint(zone_id=zone_id, day_type=day_type, hour=hour, volume=by_hour.get(hour, 0))
            for hour in range(HOURS_PER_DAY)
        ]

    def replace(
        self,
        *,
        zone_id: Any,
        day_type: Any,
        volumes: Union[Sequence[Any], Mapping[Any, Any]],
    ) -> int:
        """Store a full day of volumes, given as a 24-item list or an hour->volume mapping.

        Only non-zero hours are written. Returns the number of stored rows.
        """

        zone_id = require_int(zone_id, "Zone", minimum=1)
        day_type = require_day_type(day_type)

        if isinstance(volumes, Mapping):
            series = [0] * HOURS_PER_DAY
            for hour, volume in volumes.items():
                series[require_int(hour, "Hour", minimum=0, maximum=HOURS_PER_DAY - 1)] = volume
        else:
            series = list(volumes)
            if len(series) != HOURS_PER_DAY:
                raise ValidationError(f"Expected {HOURS_PER_DAY} hourly volumes, got {len(series)}")

        points = []
        for hour, volume in enumerate(series):
            volume = require_int(volume, f"Call volume at {hour}:00", minimum=0)
            if volume > 0:
                points.append(CallVolumePoint(zone_id=zone_id, day_type=day_type, hour=hour, volume=volume))

        stored = self._volumes.replace(zone_id=zone_id, day_type=day_type, points=points)
        logger.info("call volumes replaced for zone %s (%s): %s rows", zone_id, day_type.value, stored)
        return stored
