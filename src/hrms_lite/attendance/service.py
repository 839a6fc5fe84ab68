from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import now_iso
from ..common.validators import is_present, parse_status, require_valid_date
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..database.sqlite_base import DuplicateKeyError, MissingReferenceError
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: record daily attendance and read an employee's history."""

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def record(self, *, employee_id: Any, date: Any, status: Any) -> AttendanceRecord:
        if not (is_present(employee_id) and is_present(date) and is_present(status)):
            raise ValidationError("Employee ID, date, and status are required.")

        require_valid_date(date, "Date must be in YYYY-MM-DD format.")
        status_e = parse_status(status)

        created_at = now_iso()
        try:
            record_id = self._attendance.create_record(
                employee_id=employee_id,
                date=date,
                status=status_e,
                created_at=created_at,
            )
        except MissingReferenceError:
            raise NotFoundError("Employee not found.")
        except DuplicateKeyError:
            raise ConflictError("Attendance already recorded for this date.")

        logger.info("attendance %s for %s on %s", status_e.value, employee_id, date)
        return AttendanceRecord(
            id=record_id,
            employee_id=employee_id,
            date=date,
            status=status_e,
            created_at=created_at,
        )

    def record_from_payload(self, payload: Mapping[str, Any]) -> AttendanceRecord:
        return self.record(
            employee_id=payload.get("employeeId"),
            date=payload.get("date"),
            status=payload.get("status"),
        )

    def history(
        self,
        employee_id: str,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        """Records of one employee, newest date first, bounds inclusive."""
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found.")

        if start_date:
            require_valid_date(start_date, "Start date must be in YYYY-MM-DD format.")
        if end_date:
            require_valid_date(end_date, "End date must be in YYYY-MM-DD format.")

        return self._attendance.list_for_employee(employee_id, start_date=start_date, end_date=end_date)
