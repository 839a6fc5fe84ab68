from __future__ import annotations

import re
from typing import Any

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+", re.IGNORECASE)
# Shape only: calendar validity is not checked, 2024-02-30 passes.
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and _EMAIL_RE.fullmatch(value) is not None


def is_valid_date(value: Any) -> bool:
    return isinstance(value, str) and _DATE_RE.fullmatch(value) is not None


def is_present(value: Any) -> bool:
    """Falsy values (None, "", 0, False) and JSON containers count as missing."""
    return bool(value) and not isinstance(value, (dict, list))


def require_non_empty(value: Any, message: str) -> Any:
    """Return ``value`` untouched, or raise if it is missing."""
    if not is_present(value):
        raise ValidationError(message)
    return value


def require_valid_date(value: Any, message: str) -> str:
    if not is_valid_date(value):
        raise ValidationError(message)
    return value


def parse_status(value: Any) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError("Status must be Present or Absent.")
