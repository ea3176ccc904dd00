from __future__ import annotations

from typing import Any, Dict, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Province
from .repository import ProvinceRepository

_SELECT = """
    SELECT p.province_id, p.name, p.zone_id, p.work_start_time, p.work_end_time, p.operators, z.name AS zone_name
    FROM provinces p
    JOIN zones z ON z.zone_id = p.zone_id
"""


def _to_province(r: Dict[str, Any]) -> Province:
    return Province(
        province_id=int(r["province_id"]),
        name=r["name"],
        zone_id=int(r["zone_id"]),
        work_start_time=int(r["work_start_time"]),
        work_end_time=int(r["work_end_time"]),
        operators=int(r["operators"] or 0),
        zone_name=r.get("zone_name"),
    )


class MySQLProvinceRepository(ProvinceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Province]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY p.zone_id, p.province_id")
            return [_to_province(r) for r in fetchall(cur)]

    def list_for_zone(self, zone_id: int) -> Sequence[Province]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE p.zone_id=%s ORDER BY p.province_id", (int(zone_id),))
            return [_to_province(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        name: str,
        zone_id: int,
        work_start_time: int,
        work_end_time: int,
        operators: int,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO provinces(name, zone_id, work_start_time, work_end_time, operators)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (name, int(zone_id), int(work_start_time), int(work_end_time), int(operators)),
            )
            return int(cur.lastrowid)

    def delete(self, province_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM provinces WHERE province_id=%s", (int(province_id),))
            return cur.rowcount > 0
