from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from hrms_lite.container import build_container
from hrms_lite.core.exceptions import ConflictError
from hrms_lite.database.bootstrap import apply_schema

DEMO_EMPLOYEES = [
    ("E001", "Ann Lee", "ann.lee@example.com", "Engineering"),
    ("E002", "Bao Tran", "bao.tran@example.com", "Finance"),
    ("E003", "Chloe Martin", "chloe.martin@example.com", "HR"),
]

DEMO_ATTENDANCE = [
    ("E001", "2024-01-02", "Present"),
    ("E001", "2024-01-03", "Present"),
    ("E002", "2024-01-02", "Absent"),
    ("E002", "2024-01-03", "Present"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_path=settings.DB_PATH)
    apply_schema(container.conn)

    created = 0
    for employee_id, full_name, email, department in DEMO_EMPLOYEES:
        try:
            container.employee_service.create_employee(
                employee_id=employee_id,
                full_name=full_name,
                email=email,
                department=department,
            )
            created += 1
        except ConflictError:
            pass

    recorded = 0
    for employee_id, day, status in DEMO_ATTENDANCE:
        try:
            container.attendance_service.record(employee_id=employee_id, date=day, status=status)
            recorded += 1
        except ConflictError:
            pass

    print(f"OK: Seeded {container.conn.path} (employees+={created}, attendance+={recorded})")


if __name__ == "__main__":
    main()
