from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class PresentDays:
    """Read-model: present-day count of one employee."""

    employee_id: str
    full_name: str
    present_days: int


@dataclass(frozen=True)
class Summary:
    employees: int
    attendance: int
    present: int
    present_by_employee: List[PresentDays] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "totals": {
                "employees": self.employees,
                "attendance": self.attendance,
                "present": self.present,
            },
            "presentByEmployee": [
                {
                    "employee_id": p.employee_id,
                    "full_name": p.full_name,
                    "present_days": p.present_days,
                }
                for p in self.present_by_employee
            ],
        }
