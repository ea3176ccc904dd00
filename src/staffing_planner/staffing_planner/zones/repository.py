from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Province, Zone, ZoneSummary


class ZoneRepository(Protocol):
    def list_summaries(self) -> Sequence[ZoneSummary]:
        raise NotImplementedError

    def get_by_id(self, zone_id: int) -> Optional[Zone]:
        """Zone without its provinces (see ProvinceRepository.list_for_zone)."""

        raise NotImplementedError

    def create(self, *, name: str, description: str) -> int:
        raise NotImplementedError

    def delete(self, zone_id: int) -> bool:
        raise NotImplementedError


class ProvinceRepository(Protocol):
    def list_all(self) -> Sequence[Province]:
        raise NotImplementedError

    def list_for_zone(self, zone_id: int) -> Sequence[Province]:
        """Provinces of a zone in stable (insertion) order."""

        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        zone_id: int,
        work_start_time: int,
        work_end_time: int,
        operators: int,
    ) -> int:
        raise NotImplementedError

    def delete(self, province_id: int) -> bool:
        raise NotImplementedError
