"""Example: drive the service layer directly (no Flask).

Controllers are a thin layer; the rules live in the services.
"""

from hrms_lite.container import build_container
from hrms_lite.database.bootstrap import apply_schema


def main():
    container = build_container(db_path=":memory:")
    apply_schema(container.conn)

    container.employee_service.create_employee(
        employee_id="E1",
        full_name="Ann",
        email="ann@x.com",
        department="Eng",
    )
    container.attendance_service.record(employee_id="E1", date="2024-01-01", status="Present")
    print(container.summary_service.build().to_dict())


if __name__ == "__main__":
    main()
