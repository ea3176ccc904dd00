from __future__ import annotations

import json
from typing import Sequence

from ..core.enums import DayType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import PersonnelDistributionRecord
from .repository import DistributionRepository


class MySQLDistributionRepository(DistributionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def replace(self, *, zone_id: int, day_type: DayType, records: Sequence[PersonnelDistributionRecord]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM personnel_distribution WHERE zone_id=%s AND day_type=%s",
                (int(zone_id), day_type.value),
            )
            if records:
                cur.executemany(
                    """
                    INSERT INTO personnel_distribution
                        (zone_id, province_id, day_type, work_date, hour, operators, break_time, breaks_data)
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    [
                        (
                            int(r.zone_id),
                            int(r.province_id),
                            r.day_type.value,
                            r.on_date,
                            int(r.hour),
                            int(r.operators),
                            int(r.break_time),
                            r.breaks_data,
                        )
                        for r in records
                    ],
                )
            return len(records)

    def list_saved(self, *, zone_id: int, day_type: DayType) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT pd.province_id, p.name AS province_name, pd.work_date, pd.hour,
                       pd.operators, pd.break_time, pd.breaks_data
                FROM personnel_distribution pd
                JOIN provinces p ON p.province_id = pd.province_id
                WHERE pd.zone_id=%s AND pd.day_type=%s
                ORDER BY pd.hour ASC, pd.province_id ASC
                """,
                (int(zone_id), day_type.value),
            )
            out: list[dict] = []
            for r in fetchall(cur):
                out.append(
                    {
                        "province_id": int(r["province_id"]),
                        "province_name": r["province_name"],
                        "date": r["work_date"].strftime("%Y-%m-%d"),
                        "hour": int(r["hour"]),
                        "operators": int(r["operators"]),
                        "break_time": int(r["break_time"]),
                        "shifts": json.loads(r["breaks_data"] or "{}").get("shifts", []),
                    }
                )
            return out
