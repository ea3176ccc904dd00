from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import DayType
from .model import CallVolumePoint


class CallVolumeRepository(Protocol):
    def list_for(self, *, zone_id: int, day_type: DayType) -> Sequence[CallVolumePoint]:
        """Stored points ordered by hour (hours without data are absent)."""

        raise NotImplementedError

    def replace(self, *, zone_id: int, day_type: DayType, points: Sequence[CallVolumePoint]) -> int:
        """Delete all points of (zone, day type) and insert ``points``.

        Returns the number of rows inserted.
        """

        raise NotImplementedError
