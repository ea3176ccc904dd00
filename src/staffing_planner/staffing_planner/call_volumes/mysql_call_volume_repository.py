from __future__ import annotations

from typing import Sequence

from ..core.enums import DayType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import CallVolumePoint
from .repository import CallVolumeRepository


class MySQLCallVolumeRepository(CallVolumeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for(self, *, zone_id: int, day_type: DayType) -> Sequence[CallVolumePoint]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT zone_id, day_type, hour, volume
                FROM call_volumes
                WHERE zone_id=%s AND day_type=%s
                ORDER BY hour ASC
                """,
                (int(zone_id), day_type.value),
            )
            return [
                CallVolumePoint(
                    zone_id=int(r["zone_id"]),
                    day_type=DayType(r["day_type"]),
                    hour=int(r["hour"]),
                    volume=int(r["volume"] or 0),
                )
                for r in fetchall(cur)
            ]

    def replace(self, *, zone_id: int, day_type: DayType, points: Sequence[CallVolumePoint]) -> int:
        # Single transaction: the delete is rolled back if an insert fails.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM call_volumes WHERE zone_id=%s AND day_type=%s",
                (int(zone_id), day_type.value),
            )
            if points:
                cur.executemany(
                    "INSERT INTO call_volumes(zone_id, day_type, hour, volume) VALUES(%s,%s,%s,%s)",
                    [(int(p.zone_id), p.day_type.value, int(p.hour), int(p.volume)) for p in points],
                )
            return len(points)
