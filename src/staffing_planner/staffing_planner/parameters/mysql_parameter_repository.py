from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import SystemParameters
from .repository import ParameterRepository


class MySQLParameterRepository(ParameterRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[SystemParameters]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT parameters_id, attendance_duration, standard_break_time, average_response_rate
                FROM system_parameters
                ORDER BY parameters_id
                LIMIT 1
                """
            )
            r = fetchone(cur)
            if not r:
                return None
            return SystemParameters(
                parameters_id=int(r["parameters_id"]),
                attendance_duration=int(r["attendance_duration"]),
                standard_break_time=int(r["standard_break_time"]),
                average_response_rate=int(r["average_response_rate"]),
            )

    def insert(self, *, attendance_duration: int, standard_break_time: int, average_response_rate: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO system_parameters(attendance_duration, standard_break_time, average_response_rate)
                VALUES(%s,%s,%s)
                """,
                (int(attendance_duration), int(standard_break_time), int(average_response_rate)),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        parameters_id: int,
        attendance_duration: int,
        standard_break_time: int,
        average_response_rate: int,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE system_parameters
                SET attendance_duration=%s, standard_break_time=%s, average_response_rate=%s
                WHERE parameters_id=%s
                """,
                (int(attendance_duration), int(standard_break_time), int(average_response_rate), int(parameters_id)),
            )
            return cur.rowcount > 0
