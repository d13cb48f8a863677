from __future__ import annotations

import importlib
from datetime import datetime, timezone
from types import ModuleType

import pytest

from src.looply.looply import main
from src.looply.looply.common import datetime_utils
from src.looply.looply.database.seed import DEMO_COMPANY_ID, DEMO_OWNER_EMAIL, DEMO_OWNER_PASSWORD

SHIFT = {"startTime": "22:00", "endTime": "06:00", "breakMinutes": 30, "description": "Night shift"}


def _employer_with_company(client):
    r = client.post("/api/auth/signup", json={"email": "boss@example.com", "password": "secret123", "name": "Boss"})
    assert r.status_code == 201
    r = client.post("/api/companies", json={"name": "Acme", "timezone": "UTC"})
    assert r.status_code == 201
    return r.get_json()["company"]["id"]


def _add_employee(client, company_id, name="Sarah"):
    r = client.post(f"/api/companies/{company_id}/employees", json={"name": name, "position": "Developer"})
    assert r.status_code == 201
    return r.get_json()["employee"]


def test_requires_sign_in(client):
    r = client.get("/api/companies/x/dashboard")
    assert r.status_code == 401
    assert r.get_json()["success"] is False


def test_employee_cannot_open_dashboard(app):
    employer = app.test_client()
    company_id = _employer_with_company(employer)
    employee = _add_employee(employer, company_id)

    worker = app.test_client()
    assert worker.post("/api/auth/access-code", json={"accessCode": employee["accessCode"]}).status_code == 200
    assert worker.get(f"/api/companies/{company_id}/dashboard").status_code == 403


def test_full_report_flow(app):
    employer = app.test_client()
    company_id = _employer_with_company(employer)
    employee = _add_employee(employer, company_id)

    worker = app.test_client()
    worker.post("/api/auth/access-code", json={"accessCode": employee["accessCode"]})

    r = worker.put("/api/reports/2026-02-01", json={"summary": 'Said "hi"', "shifts": [SHIFT]})
    assert r.status_code == 200
    assert r.get_json()["report"]["totalHours"] == 7.5
    assert r.get_json()["report"]["status"] == "draft"

    r = worker.post("/api/reports/2026-02-01/submit")
    assert r.status_code == 200
    assert r.get_json()["report"]["status"] == "submitted"

    r = employer.get(f"/api/companies/{company_id}/dashboard?asOf=2026-02-01")
    assert r.get_json()["stats"] == {
        "totalSubmissions": 1,
        "pendingEODs": 0,
        "activeEmployees": 1,
        "averageHours": 7.5,
    }

    r = employer.get(f"/api/companies/{company_id}/reports.csv")
    assert r.mimetype == "text/csv"
    lines = r.get_data(as_text=True).splitlines()
    assert lines[1] == '2026-02-01,"Sarah",7.50,"22:00-06:00 (30min break) - Night shift","Said ""hi""",submitted'


def test_submit_without_draft_is_404(app):
    employer = app.test_client()
    company_id = _employer_with_company(employer)
    employee = _add_employee(employer, company_id)

    worker = app.test_client()
    worker.post("/api/auth/access-code", json={"accessCode": employee["accessCode"]})

    assert worker.post("/api/reports/2026-02-01/submit").status_code == 404


@pytest.mark.parametrize(
    "payload",
    [
        {"summary": "x", "shifts": [{"startTime": "25:00", "endTime": "06:00"}]},
        {"summary": "x", "shifts": [{"startTime": "08:00", "endTime": "09:00", "breakMinutes": -1}]},
        {"summary": "x", "shifts": "08:00-09:00"},
    ],
)
def test_bad_shift_input_is_400(app, payload):
    employer = app.test_client()
    company_id = _employer_with_company(employer)
    employee = _add_employee(employer, company_id)

    worker = app.test_client()
    worker.post("/api/auth/access-code", json={"accessCode": employee["accessCode"]})

    assert worker.put("/api/reports/2026-02-01", json=payload).status_code == 400


def test_bad_date_is_400(app):
    employer = app.test_client()
    company_id = _employer_with_company(employer)
    employee = _add_employee(employer, company_id)

    worker = app.test_client()
    worker.post("/api/auth/access-code", json={"accessCode": employee["accessCode"]})

    assert worker.put("/api/reports/yesterday", json={"summary": "x", "shifts": []}).status_code == 400


def test_employer_cannot_read_other_company(app):
    first = app.test_client()
    _employer_with_company(first)

    second = app.test_client()
    second.post("/api/auth/signup", json={"email": "other@example.com", "password": "secret123", "name": "Other"})
    other_id = second.post("/api/companies", json={"name": "Other", "timezone": "UTC"}).get_json()["company"]["id"]

    assert first.get(f"/api/companies/{other_id}/employees").status_code == 403


def test_deactivate_and_remove_employee(app):
    employer = app.test_client()
    company_id = _employer_with_company(employer)
    employee = _add_employee(employer, company_id)

    r = employer.post(f"/api/employees/{employee['id']}/active", json={"isActive": False})
    assert r.get_json()["employee"]["isActive"] is False
    assert employer.get(f"/api/companies/{company_id}/dashboard").get_json()["stats"]["pendingEODs"] == 0

    assert employer.delete(f"/api/employees/{employee['id']}").status_code == 200
    assert employer.delete(f"/api/employees/{employee['id']}").status_code == 404


def test_signin_with_wrong_password_is_401(client):
    client.post("/api/auth/signup", json={"email": "boss@example.com", "password": "secret123", "name": "Boss"})
    client.post("/api/auth/signout")
    assert client.post("/api/auth/signin", json={"email": "boss@example.com", "password": "nope"}).status_code == 401


def test_malformed_body_keeps_saved_draft(app):
    employer = app.test_client()
    company_id = _employer_with_company(employer)
    employee = _add_employee(employer, company_id)

    worker = app.test_client()
    worker.post("/api/auth/access-code", json={"accessCode": employee["accessCode"]})
    worker.put("/api/reports/2026-02-01", json={"summary": "Real work", "shifts": [SHIFT]})

    r = worker.put("/api/reports/2026-02-01", data="{not json", content_type="application/json")
    assert r.status_code == 400
    r = worker.put("/api/reports/2026-02-01", data="summary=oops")
    assert r.status_code == 400

    report = worker.get("/api/reports/2026-02-01").get_json()["report"]
    assert report["summary"] == "Real work"
    assert len(report["shifts"]) == 1
    assert report["totalHours"] == 7.5


def test_seeded_dashboard_defaults_to_the_seeded_day(monkeypatch):
    late_evening = datetime(2026, 2, 1, 23, 30, tzinfo=timezone.utc)
    monkeypatch.setattr(datetime_utils, "now_utc", lambda: late_evening)
    monkeypatch.setattr(main, "now_utc", lambda: late_evening)

    settings = ModuleType("seeded")
    settings.__dict__.update(vars(importlib.import_module("config.testing")))
    settings.AUTO_SEED_DB = True
    employer = main.create_app(settings).test_client()

    r = employer.post("/api/auth/signin", json={"email": DEMO_OWNER_EMAIL, "password": DEMO_OWNER_PASSWORD})
    assert r.status_code == 200
    stats = employer.get(f"/api/companies/{DEMO_COMPANY_ID}/dashboard").get_json()["stats"]
    # Three team reports today, the first employee's is replaced by a draft.
    assert stats["totalSubmissions"] == 2
    assert stats["pendingEODs"] == 8
