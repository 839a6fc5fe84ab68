from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=row["employee_id"],
        full_name=row["full_name"],
        email=row["email"],
        department=row["department"],
        created_at=row["created_at"],
    )


class SQLiteEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, full_name, email, department, created_at
                FROM employees
                WHERE employee_id=?
                """,
                (employee_id,),
            )
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            # rowid breaks ties between rows created within the same millisecond
            cur.execute(
                """
                SELECT employee_id, full_name, email, department, created_at
                FROM employees
                ORDER BY created_at DESC, rowid DESC
                """
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def create_employee(
        self,
        *,
        employee_id: str,
        full_name: str,
        email: str,
        department: str,
        created_at: str,
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(employee_id, full_name, email, department, created_at)
                VALUES(?,?,?,?,?)
                """,
                (employee_id, full_name, email, department, created_at),
            )

    def delete_by_id(self, employee_id: str) -> bool:
        # attendance rows go with it through ON DELETE CASCADE
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=?", (employee_id,))
            return cur.rowcount > 0
