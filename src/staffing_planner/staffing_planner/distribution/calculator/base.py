from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Collection, Hashable, Protocol, Sequence


class StaffedProvince(Protocol):
    province_id: Hashable
    operators: int
    work_start_time: int
    work_end_time: int


class DistributionCalculator(ABC):
    """Calculator interface (Strategy Pattern for operator distribution)."""

    @abstractmethod
    def operators_needed(self, call_volume: int, response_rate: float) -> int:
        raise NotImplementedError

    @abstractmethod
    def distribute(
        self,
        total_needed: int,
        provinces: Sequence[StaffedProvince],
        active_hours: Collection[int],
    ) -> dict:
        """Map province_id -> operators assigned for ``active_hours``."""

        raise NotImplementedError
