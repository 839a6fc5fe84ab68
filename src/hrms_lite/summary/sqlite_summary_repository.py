from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import PresentDays
from .repository import SummaryRepository


class SQLiteSummaryRepository(SummaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def count_employees(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM employees")
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def count_attendance(self, *, status: Optional[str] = None) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            if status is None:
                cur.execute("SELECT COUNT(*) AS total FROM attendance")
            else:
                cur.execute("SELECT COUNT(*) AS total FROM attendance WHERE status=?", (status,))
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def present_days_by_employee(self) -> Sequence[PresentDays]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.employee_id, e.full_name, COUNT(a.id) AS present_days
                FROM employees e
                LEFT JOIN attendance a
                  ON e.employee_id = a.employee_id AND a.status = ?
                GROUP BY e.employee_id, e.full_name
                ORDER BY present_days DESC, e.full_name ASC
                """,
                (AttendanceStatus.PRESENT.value,),
            )
            return [
                PresentDays(
                    employee_id=r["employee_id"],
                    full_name=r["full_name"],
                    present_days=int(r["present_days"]),
                )
                for r in fetchall(cur)
            ]
