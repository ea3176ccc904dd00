from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .repository import AdminRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    admin_id: int
    full_name: str
    role: Role


class AuthService:
    """Use case: authenticate an administrator (login)."""

    def __init__(self, admins: AdminRepository):
        self._admins = admins

    def authenticate(self, username: str, password: str) -> SessionUser:
        try:
            username = require_non_empty(username, "Username")
        except ValidationError:
            raise AuthenticationError("Invalid username or password")

        admin = self._admins.get_by_username(username)
        if not admin or not admin.is_active:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = check_password_hash(admin.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.warning("failed login for %s", username)
            raise AuthenticationError("Invalid username or password")

        return SessionUser(admin_id=admin.admin_id, full_name=admin.full_name, role=admin.role)
