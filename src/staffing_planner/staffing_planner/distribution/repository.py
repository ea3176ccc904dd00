from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import DayType
from .model import PersonnelDistributionRecord


class DistributionRepository(Protocol):
    def replace(self, *, zone_id: int, day_type: DayType, records: Sequence[PersonnelDistributionRecord]) -> int:
        """Delete saved rows of (zone, day type) and insert ``records``.

        Returns the number of rows inserted.
        """

        raise NotImplementedError

    def list_saved(self, *, zone_id: int, day_type: DayType) -> Sequence[dict]:
        raise NotImplementedError
