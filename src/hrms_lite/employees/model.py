from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object, no database access here.
    """

    employee_id: str
    full_name: str
    email: str
    department: str
    created_at: str

    def to_dict(self) -> dict:
        return asdict(self)
