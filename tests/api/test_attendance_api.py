import pytest


def test_record(record, make_employee):
    make_employee("E1")
    res = record("E1", "2024-01-01", "Present")
    assert res.status_code == 201
    assert res.get_json() == {"message": "Attendance recorded."}


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"date": "2024-01-01", "status": "Present"}, "Employee ID, date, and status are required."),
        ({"employeeId": "E1", "date": "2024-1-1", "status": "Present"}, "Date must be in YYYY-MM-DD format."),
        ({"employeeId": "E1", "date": "2024-01-01", "status": "Late"}, "Status must be Present or Absent."),
    ],
)
def test_record_validation(client, make_employee, payload, message):
    make_employee("E1")
    res = client.post("/api/attendance", json=payload)
    assert res.status_code == 400
    assert res.get_json() == {"error": message}


def test_record_unknown_employee(record):
    res = record("E404", "2024-01-01")
    assert res.status_code == 404
    assert res.get_json() == {"error": "Employee not found."}


def test_record_twice_conflicts(client, record, make_employee):
    make_employee("E1")
    record("E1", "2024-01-01", "Present")
    res = record("E1", "2024-01-01", "Absent")
    assert res.status_code == 409
    assert res.get_json() == {"error": "Attendance already recorded for this date."}
    [rec] = client.get("/api/employees/E1/attendance").get_json()["records"]
    assert rec["status"] == "Present"


def test_calendar_invalid_date_accepted(record, make_employee):
    make_employee("E1")
    assert record("E1", "2024-02-30").status_code == 201


def test_history_full_and_descending(client, record, make_employee):
    make_employee("E1")
    for day in ("2024-01-03", "2024-01-01", "2024-01-02"):
        record("E1", day)
    records = client.get("/api/employees/E1/attendance").get_json()["records"]
    assert [r["date"] for r in records] == ["2024-01-03", "2024-01-02", "2024-01-01"]
    assert set(records[0]) == {"id", "employee_id", "date", "status", "created_at"}


def test_history_range(client, record, make_employee):
    make_employee("E1")
    for day in ("2024-01-09", "2024-01-10", "2024-01-15", "2024-01-20", "2024-01-21"):
        record("E1", day)
    res = client.get("/api/employees/E1/attendance?startDate=2024-01-10&endDate=2024-01-20")
    assert [r["date"] for r in res.get_json()["records"]] == ["2024-01-20", "2024-01-15", "2024-01-10"]


def test_history_single_bound(client, record, make_employee):
    make_employee("E1")
    for day in ("2024-01-09", "2024-01-10", "2024-01-11"):
        record("E1", day)
    res = client.get("/api/employees/E1/attendance?endDate=2024-01-10")
    assert [r["date"] for r in res.get_json()["records"]] == ["2024-01-10", "2024-01-09"]


def test_history_other_employees_excluded(client, record, make_employee):
    make_employee("E1")
    make_employee("E2")
    record("E1", "2024-01-01")
    record("E2", "2024-01-01")
    records = client.get("/api/employees/E2/attendance").get_json()["records"]
    assert [r["employee_id"] for r in records] == ["E2"]


@pytest.mark.parametrize(
    "query, message",
    [
        ("startDate=01-10-2024", "Start date must be in YYYY-MM-DD format."),
        ("endDate=2024/01/20", "End date must be in YYYY-MM-DD format."),
    ],
)
def test_history_bad_bounds(client, make_employee, query, message):
    make_employee("E1")
    res = client.get(f"/api/employees/E1/attendance?{query}")
    assert res.status_code == 400
    assert res.get_json() == {"error": message}


def test_history_unknown_employee(client):
    res = client.get("/api/employees/E404/attendance")
    assert res.status_code == 404
    assert res.get_json() == {"error": "Employee not found."}
