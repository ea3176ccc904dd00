from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Admin
from .repository import AdminRepository


def _to_admin(row: Dict[str, Any]) -> Admin:
    return Admin(
        admin_id=int(row["admin_id"]),
        full_name=row["full_name"],
        username=row["username"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, admin_id: int) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT admin_id, full_name, username, password_hash, role, is_active
                FROM admins
                WHERE admin_id=%s
                """,
                (int(admin_id),),
            )
            row = fetchone(cur)
            return _to_admin(row) if row else None

    def get_by_username(self, username: str) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT admin_id, full_name, username, password_hash, role, is_active
                FROM admins
                WHERE username=%s
                """,
                (username,),
            )
            row = fetchone(cur)
            return _to_admin(row) if row else None
