from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .attendance.sqlite_attendance_repository import SQLiteAttendanceRepository
from .database.connection import DBConfig, DatabaseConnection
from .employees.service import EmployeeService
from .employees.sqlite_employee_repository import SQLiteEmployeeRepository
from .summary.service import SummaryService
from .summary.sqlite_summary_repository import SQLiteSummaryRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: SQLiteEmployeeRepository
    attendance_repo: SQLiteAttendanceRepository
    summary_repo: SQLiteSummaryRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    summary_service: SummaryService


def build_container(*, db_path: str) -> Container:
    conn = DatabaseConnection(DBConfig(path=str(db_path)))

    employees_repo = SQLiteEmployeeRepository(conn)
    attendance_repo = SQLiteAttendanceRepository(conn)
    summary_repo = SQLiteSummaryRepository(conn)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        summary_repo=summary_repo,
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo),
        summary_service=SummaryService(summary_repo),
    )
