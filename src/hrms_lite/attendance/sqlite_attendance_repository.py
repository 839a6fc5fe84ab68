from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


class SQLiteAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_record(
        self,
        *,
        employee_id: str,
        date: str,
        status: AttendanceStatus,
        created_at: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(employee_id, date, status, created_at)
                VALUES(?,?,?,?)
                """,
                (employee_id, date, status.value, created_at),
            )
            return int(cur.lastrowid)

    def list_for_employee(
        self,
        employee_id: str,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        where = ["employee_id = ?"]
        params: list = [employee_id]
        if start_date:
            where.append("date >= ?")
            params.append(start_date)
        if end_date:
            where.append("date <= ?")
            params.append(end_date)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, employee_id, date, status, created_at
                FROM attendance
                WHERE {' AND '.join(where)}
                ORDER BY date DESC
                """,
                tuple(params),
            )
            return [
                AttendanceRecord(
                    id=int(r["id"]),
                    employee_id=r["employee_id"],
                    date=r["date"],
                    status=AttendanceStatus(r["status"]),
                    created_at=r["created_at"],
                )
                for r in fetchall(cur)
            ]
