from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Zone, ZoneSummary
from .repository import ZoneRepository


class MySQLZoneRepository(ZoneRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_summaries(self) -> Sequence[ZoneSummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    z.zone_id,
                    z.name,
                    z.description,
                    COUNT(p.province_id) AS province_count,
                    COALESCE(SUM(p.operators), 0) AS operator_count
                FROM zones z
                LEFT JOIN provinces p ON p.zone_id = z.zone_id
                GROUP BY z.zone_id, z.name, z.description
                ORDER BY z.zone_id
                """
            )
            rows = fetchall(cur)
            return [
                ZoneSummary(
                    zone_id=int(r["zone_id"]),
                    name=r["name"],
                    description=r.get("description") or "",
                    province_count=int(r["province_count"] or 0),
                    operator_count=int(r["operator_count"] or 0),
                )
                for r in rows
            ]

    def get_by_id(self, zone_id: int) -> Optional[Zone]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT zone_id, name, description FROM zones WHERE zone_id=%s", (int(zone_id),))
            r = fetchone(cur)
            if not r:
                return None
            return Zone(zone_id=int(r["zone_id"]), name=r["name"], description=r.get("description") or "")

    def create(self, *, name: str, description: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO zones(name, description) VALUES(%s,%s)", (name, description))
            return int(cur.lastrowid)

    def delete(self, zone_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM zones WHERE zone_id=%s", (int(zone_id),))
            return cur.rowcount > 0
