from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..common.datetime_utils import now_iso
from ..common.validators import is_valid_email, require_non_empty
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..database.sqlite_base import DuplicateKeyError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee roster."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def create_employee(
        self,
        *,
        employee_id: Any,
        full_name: Any,
        email: Any,
        department: Any,
    ) -> Employee:
        for value in (employee_id, full_name, email, department):
            require_non_empty(value, "All fields are required.")

        if not is_valid_email(email):
            raise ValidationError("Email format is invalid.")

        created_at = now_iso()
        try:
            self._employees.create_employee(
                employee_id=employee_id,
                full_name=full_name,
                email=email,
                department=department,
                created_at=created_at,
            )
        except DuplicateKeyError as exc:
            # The id conflict wins when both the id and the email are taken.
            if "employee_id" in exc.columns or self._employees.get_by_id(employee_id):
                raise ConflictError("Employee ID already exists.")
            raise ConflictError("Email already exists.")

        logger.info("employee %s created", employee_id)
        return Employee(
            employee_id=employee_id,
            full_name=full_name,
            email=email,
            department=department,
            created_at=created_at,
        )

    def create_from_payload(self, payload: Mapping[str, Any]) -> Employee:
        return self.create_employee(
            employee_id=payload.get("employeeId"),
            full_name=payload.get("fullName"),
            email=payload.get("email"),
            department=payload.get("department"),
        )

    def delete_employee(self, employee_id: str) -> None:
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Employee not found.")
        logger.info("employee %s deleted", employee_id)
