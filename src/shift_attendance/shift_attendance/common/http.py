from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request

from ..core.exceptions import DatabaseError, DomainError, ValidationError

logger = logging.getLogger(__name__)


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("JSON object body required")
    return data


def api_view(view):
    """Turn domain errors into ``{"success": false, "error": ...}`` responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            return jsonify({"success": False, "error": str(e)}), e.status_code
        except DatabaseError:
            logger.exception("Database error on %s %s", request.method, request.path)
            return jsonify({"success": False, "error": "Database error"}), DatabaseError.status_code

    return wrapper
