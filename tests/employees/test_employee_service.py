from __future__ import annotations

from typing import Optional

import pytest

from hrms_lite.core.exceptions import ConflictError, NotFoundError, ValidationError
from hrms_lite.database.sqlite_base import DuplicateKeyError
from hrms_lite.employees.model import Employee
from hrms_lite.employees.service import EmployeeService


class InMemoryEmployees:
    def __init__(self):
        self._by_id: dict[str, Employee] = {}

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def list_all(self):
        return sorted(self._by_id.values(), key=lambda e: e.created_at, reverse=True)

    def create_employee(self, *, employee_id, full_name, email, department, created_at) -> None:
        if employee_id in self._by_id:
            raise DuplicateKeyError(("employee_id",))
        if any(e.email == email for e in self._by_id.values()):
            raise DuplicateKeyError(("email",))
        self._by_id[employee_id] = Employee(employee_id, full_name, email, department, created_at)

    def delete_by_id(self, employee_id: str) -> bool:
        return self._by_id.pop(employee_id, None) is not None


@pytest.fixture
def svc():
    return EmployeeService(InMemoryEmployees())


def _create(svc, employee_id="E1", email="ann@x.com", **kw):
    return svc.create_employee(
        employee_id=employee_id,
        full_name=kw.get("full_name", "Ann"),
        email=email,
        department=kw.get("department", "Eng"),
    )


def test_create_then_list(svc):
    emp = _create(svc)
    assert emp.employee_id == "E1"
    assert emp.created_at.endswith("Z")
    assert [e.employee_id for e in svc.list_employees()] == ["E1"]


@pytest.mark.parametrize("blank", [None, "", 0])
@pytest.mark.parametrize("missing", ["employee_id", "full_name", "email", "department"])
def test_every_field_is_required(svc, missing, blank):
    kwargs = {"employee_id": "E1", "full_name": "Ann", "email": "ann@x.com", "department": "Eng"}
    kwargs[missing] = blank
    with pytest.raises(ValidationError, match="All fields are required."):
        svc.create_employee(**kwargs)


def test_bad_email_rejected(svc):
    with pytest.raises(ValidationError, match="Email format is invalid."):
        _create(svc, email="not-an-email")


def test_duplicate_id_conflicts_even_with_new_email(svc):
    _create(svc)
    with pytest.raises(ConflictError, match="Employee ID already exists."):
        _create(svc, email="other@x.com", full_name="Someone else")


def test_duplicate_email_conflicts(svc):
    _create(svc)
    with pytest.raises(ConflictError, match="Email already exists."):
        _create(svc, employee_id="E2")


def test_id_conflict_reported_when_both_taken(svc):
    class EmailFirst(InMemoryEmployees):
        def create_employee(self, **kw):
            if any(e.email == kw["email"] for e in self._by_id.values()):
                raise DuplicateKeyError(("email",))
            super().create_employee(**kw)

    svc = EmployeeService(EmailFirst())
    _create(svc)
    with pytest.raises(ConflictError, match="Employee ID already exists."):
        _create(svc)


def test_delete_unknown_raises(svc):
    with pytest.raises(NotFoundError, match="Employee not found."):
        svc.delete_employee("nope")


def test_delete_removes(svc):
    _create(svc)
    svc.delete_employee("E1")
    assert svc.list_employees() == []


def test_create_from_payload_uses_camel_case_keys(svc):
    emp = svc.create_from_payload(
        {"employeeId": "E9", "fullName": "Zed", "email": "zed@x.com", "department": "Ops"}
    )
    assert (emp.employee_id, emp.full_name, emp.department) == ("E9", "Zed", "Ops")


def test_values_are_stored_as_sent(svc):
    emp = _create(svc, employee_id="E1 ", full_name=" Ann ", department="Eng ")
    assert (emp.employee_id, emp.full_name, emp.department) == ("E1 ", " Ann ", "Eng ")
    assert svc.list_employees()[0].employee_id == "E1 "


def test_padded_email_rejected(svc):
    with pytest.raises(ValidationError, match="Email format is invalid."):
        _create(svc, email=" ann@x.com ")
