from __future__ import annotations

from functools import wraps

from flask import current_app, jsonify, session

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    NotFoundError,
    ValidationError,
)

_STATUS = {
    ValidationError: 400,
    AuthenticationError: 401,
    AuthorizationError: 403,
    NotFoundError: 404,
}


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def login_required(view):
    """Allow only a signed-in admin; JSON 401/403 otherwise."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "admin_id" not in session:
            return error_response("Please sign in to continue", 401)
        if session.get("role") != Role.ADMIN.value:
            return error_response("You do not have permission", 403)
        return view(*args, **kwargs)

    return wrapper


def json_errors(view):
    """Translate domain errors to JSON responses; log anything unexpected as a 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return error_response(str(e), _STATUS.get(type(e), 400))
        except Exception:
            current_app.logger.exception("unhandled error in %s", view.__name__)
            return error_response("Internal server error", 500)

    return wrapper
