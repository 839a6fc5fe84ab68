from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's status for one day."""

    id: int
    employee_id: str
    date: str
    status: AttendanceStatus
    created_at: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "date": self.date,
            "status": self.status.value,
            "created_at": self.created_at,
        }
