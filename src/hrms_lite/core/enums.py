from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance status, stored verbatim in the database."""

    PRESENT = "Present"
    ABSENT = "Absent"
