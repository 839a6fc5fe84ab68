from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Mapping

from flask import jsonify, request

from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"error": message}), status


def json_body() -> Mapping[str, Any]:
    """Request JSON as a mapping; anything else counts as an empty body."""
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def api_view(failure_message: str):
    """Translate domain errors to their status code, anything else to a 500.

    The 500 body carries ``failure_message`` only; the cause goes to the log.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                logger.debug("%s %s rejected: %s", request.method, request.path, e.message)
                return json_error(e.message, e.status_code)
            except Exception:
                logger.exception("%s %s failed", request.method, request.path)
                return json_error(failure_message, 500)

        return wrapper

    return decorator
