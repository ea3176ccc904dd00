from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DayType


@dataclass(frozen=True)
class CallVolumePoint:
    """Calls received in one hour of the day for a (zone, day type) pair."""

    zone_id: int
    day_type: DayType
    hour: int
    volume: int
