from __future__ import annotations

import pytest

from hrms_lite.main import create_app, get_container


@pytest.fixture
def app(monkeypatch, tmp_path):
    monkeypatch.setenv("APP_ENV", "testing")
    static_dir = tmp_path / "static"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<h1>HRMS Lite</h1>", encoding="utf-8")
    (static_dir / "app.js").write_text("console.log('ok');", encoding="utf-8")

    app = create_app({"DB_PATH": ":memory:", "STATIC_DIR": str(static_dir), "TESTING": True})
    yield app
    get_container(app).conn.close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container(app):
    return get_container(app)


@pytest.fixture
def make_employee(client):
    def _make(employee_id="E1", full_name="Ann", email=None, department="Eng"):
        payload = {
            "employeeId": employee_id,
            "fullName": full_name,
            "email": email or f"{employee_id.lower()}@x.com",
            "department": department,
        }
        res = client.post("/api/employees", json=payload)
        assert res.status_code == 201, res.get_json()
        return payload

    return _make


@pytest.fixture
def record(client):
    def _record(employee_id, day, status="Present"):
        return client.post("/api/attendance", json={"employeeId": employee_id, "date": day, "status": status})

    return _record
