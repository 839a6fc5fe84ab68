from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def create_record(
        self,
        *,
        employee_id: str,
        date: str,
        status: AttendanceStatus,
        created_at: str,
    ) -> int:
        """Insert a row and return its id.

        Raises DuplicateKeyError when the (employee, date) pair exists and
        MissingReferenceError when the employee does not.
        """

        raise NotImplementedError

    def list_for_employee(
        self,
        employee_id: str,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
