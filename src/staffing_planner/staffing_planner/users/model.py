from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Admin:
    """Domain entity: an administrator allowed to plan staffing.

    Note: plain data object (no DB access code).
    """

    admin_id: int
    full_name: str
    username: str
    password_hash: str
    role: Role = Role.ADMIN
    is_active: bool = True
