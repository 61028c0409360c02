from __future__ import annotations

from src.payroll_desk.payroll_desk.core.enums import EmployeeStatus


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.get_json() == {"status": "ok", "database": "n/a"}


def test_owner_route_without_token(client):
    res = client.get("/api/employees")
    assert res.status_code == 403
    assert res.get_json() == {"error": "No token provided"}


def test_owner_route_with_bad_token(client):
    res = client.get("/api/employees", headers={"Authorization": "Bearer garbage"})
    assert res.status_code == 401
    assert res.get_json()["error"] == "Unauthorized: Invalid Token"


def test_employee_token_cannot_use_owner_route(client, employee_headers):
    assert client.get("/api/employees", headers=employee_headers).status_code == 403


def test_unknown_route_is_json(client):
    res = client.get("/api/nope")
    assert res.status_code == 404
    assert "error" in res.get_json()


def test_unexpected_error_passes_message(client, container, monkeypatch):
    def boom():
        raise RuntimeError("database went away")

    monkeypatch.setattr(container.holiday_service, "list_all", boom)

    res = client.get("/api/holidays")
    assert res.status_code == 500
    assert res.get_json() == {"error": "database went away"}


def test_owner_register_and_login(client):
    res = client.post("/api/auth/register", json={"email": "boss@example.com", "password": "secret1"})
    assert res.status_code == 201
    assert res.get_json()["adminId"]

    bad = client.post("/api/auth/login", json={"email": "boss@example.com", "password": "nope"})
    assert bad.status_code == 401

    ok = client.post("/api/auth/login", json={"email": "boss@example.com", "password": "secret1"})
    assert ok.status_code == 200
    token = ok.get_json()["token"]
    assert client.get("/api/employees", headers={"Authorization": f"Bearer {token}"}).status_code == 200


def test_employee_otp_login(client, otp_sender, employee):
    res = client.post("/api/auth/send-otp", json={"email": employee.email})
    assert res.status_code == 200
    _, code = otp_sender.sent[-1]

    res = client.post("/api/auth/verify-otp", json={"identifier": employee.email, "otp": code})
    body = res.get_json()
    assert res.status_code == 200
    assert body["user"]["id"] == employee.id
    assert body["token"]


def test_verify_otp_with_wrong_code(client, employee):
    res = client.post("/api/auth/verify-otp", json={"phone": employee.phone, "otp": "000001"})
    assert res.status_code == 401


def test_employee_crud(client, owner_headers):
    res = client.post(
        "/api/employees",
        headers=owner_headers,
        json={
            "full_name": "Meera Nair",
            "joining_date": "2025-02-01",
            "employment_type": "hourly",
            "work_rate": 250,
            "phone": "9111111111",
        },
    )
    assert res.status_code == 201
    created = res.get_json()["data"]
    assert created["work_rate"] == "250.00"
    assert created["joining_date"] == "2025-02-01"
    assert created["employment_type"] == "hourly"

    res = client.put(f"/api/employees/{created['id']}", headers=owner_headers, json={"department": "Kitchen"})
    assert res.get_json()["data"]["department"] == "Kitchen"

    assert client.get("/api/employees/verify/9111111111").get_json()["id"] == created["id"]
    assert client.get("/api/employees/verify/000").status_code == 404

    assert client.delete(f"/api/employees/{created['id']}", headers=owner_headers).status_code == 200
    assert client.get(f"/api/employees/{created['id']}", headers=owner_headers).status_code == 404


def test_duplicate_phone_is_bad_request(client, owner_headers, employee):
    res = client.post(
        "/api/employees",
        headers=owner_headers,
        json={
            "full_name": "Copy",
            "joining_date": "2025-02-01",
            "employment_type": "daily",
            "work_rate": 100,
            "phone": employee.phone,
        },
    )
    assert res.status_code == 400


def test_clock_in_and_out(client, employee_headers, employee):
    res = client.post("/api/attendance/clock-in", headers=employee_headers, json={})
    assert res.status_code == 201
    assert res.get_json()["data"]["employee_id"] == employee.id
    assert "date" in res.get_json()["data"] and "attendance_date" not in res.get_json()["data"]

    again = client.post("/api/attendance/clock-in", headers=employee_headers, json={})
    assert again.status_code == 400

    res = client.put("/api/attendance/clock-out", headers=employee_headers, json={})
    assert res.status_code == 200
    assert "total_hours" in res.get_json()

    assert client.put("/api/attendance/clock-out", headers=employee_headers, json={}).status_code == 404

    mine = client.get(f"/api/my-attendance/{employee.id}", headers=employee_headers).get_json()
    assert len(mine) == 1


def test_employee_cannot_act_for_someone_else(client, employee_headers):
    res = client.post("/api/attendance/clock-in", headers=employee_headers, json={"employee_id": "someone-else"})
    assert res.status_code == 403
    assert client.get("/api/my-breaks/someone-else", headers=employee_headers).status_code == 403


def test_owner_must_name_employee(client, owner_headers, employee):
    assert client.post("/api/attendance/clock-in", headers=owner_headers, json={}).status_code == 400

    res = client.post("/api/attendance/clock-in", headers=owner_headers, json={"employee_id": employee.id})
    assert res.status_code == 201

    log = client.get("/api/attendance", headers=owner_headers).get_json()
    assert log[0]["full_name"] == employee.full_name


def test_attendance_log_rejects_bad_date(client, owner_headers):
    assert client.get("/api/attendance?date=yesterday", headers=owner_headers).status_code == 400


def test_breaks(client, employee_headers, owner_headers):
    res = client.post("/api/attendance/break/start", headers=employee_headers, json={"type": "Lunch"})
    assert res.status_code == 201
    started = res.get_json()["data"]
    assert started["type"] == "Lunch"
    assert "date" in started and "break_type" not in started

    assert client.post("/api/attendance/break/start", headers=employee_headers, json={}).status_code == 400

    res = client.put("/api/attendance/break/end", headers=employee_headers, json={})
    assert res.status_code == 200
    assert res.get_json()["duration_minutes"] == 0

    assert client.put("/api/attendance/break/end", headers=employee_headers, json={}).status_code == 404
    assert len(client.get("/api/breaks", headers=owner_headers).get_json()) == 1


def test_leave_flow(client, employee_headers, owner_headers, repos, employee):
    res = client.post(
        "/api/leaves",
        headers=employee_headers,
        json={"leave_type": "medical", "start_date": "2025-03-12", "end_date": "2025-03-13", "reason": "flu"},
    )
    assert res.status_code == 201
    leave_id = res.get_json()["data"]["id"]

    res = client.put(f"/api/leaves/{leave_id}/status", headers=owner_headers, json={"status": "approved"})
    assert res.status_code == 200
    assert res.get_json()["data"]["status"] == "approved"
    assert repos.employees.get_by_id(employee.id).status == EmployeeStatus.ON_LEAVE

    assert client.get("/api/leaves", headers=owner_headers).get_json()[0]["full_name"] == employee.full_name
    assert len(client.get(f"/api/my-leaves/{employee.id}", headers=employee_headers).get_json()) == 1


def test_leave_with_inverted_dates(client, employee_headers):
    res = client.post(
        "/api/leaves",
        headers=employee_headers,
        json={"leave_type": "planned", "start_date": "2025-03-13", "end_date": "2025-03-12"},
    )
    assert res.status_code == 400


def test_holidays_public_read_owner_write(client, owner_headers):
    assert client.post("/api/holidays", json={"name": "Holi", "date": "2025-03-14"}).status_code == 403

    res = client.post("/api/holidays", headers=owner_headers, json={"name": "Holi", "date": "2025-03-14"})
    assert res.status_code == 201
    holiday_id = res.get_json()["data"]["id"]

    listed = client.get("/api/holidays").get_json()
    assert listed[0]["date"] == "2025-03-14"
    assert "holiday_date" not in listed[0]
    assert res.get_json()["data"]["date"] == "2025-03-14"

    assert client.delete(f"/api/holidays/{holiday_id}", headers=owner_headers).status_code == 200


def test_member_signup_and_approval(client, owner_headers):
    res = client.post("/api/members", json={"name": "Ravi", "number": "9000000001"})
    assert res.status_code == 201
    member_id = res.get_json()["data"]["id"]

    assert client.post("/api/members", json={"name": "Ravi"}).status_code == 400
    assert len(client.get("/api/members", headers=owner_headers).get_json()) == 1

    res = client.post(f"/api/members/{member_id}/approve", headers=owner_headers, json={"work_rate": "400"})
    assert res.status_code == 201
    assert res.get_json()["data"]["phone"] == "9000000001"
    assert res.get_json()["data"]["work_rate"] == "400.00"

    assert client.get("/api/members", headers=owner_headers).get_json() == []
    assert client.post(f"/api/members/{member_id}/reject", headers=owner_headers).status_code == 404


def test_payroll_routes(client, owner_headers, employee):
    assert client.get("/api/payroll/calculate/13/2025", headers=owner_headers).status_code == 400

    rows = client.get("/api/payroll/calculate/3/2025", headers=owner_headers).get_json()
    assert rows[0]["employee_id"] == employee.id
    assert rows[0]["gross_salary"] == "0.00"

    res = client.put(f"/api/payroll/{rows[0]['id']}/status", headers=owner_headers, json={"status": "paid"})
    assert res.get_json()["data"]["status"] == "paid"

    listed = client.get("/api/payroll/3/2025", headers=owner_headers).get_json()
    assert listed[0]["status"] == "paid"


def test_dashboard_stats(client, owner_headers, employee_headers):
    assert client.get("/dashboard/stats", headers=employee_headers).status_code == 403

    stats = client.get("/dashboard/stats", headers=owner_headers).get_json()
    assert set(stats) == {
        "totalEmployees",
        "activeEmployees",
        "presentToday",
        "lateToday",
        "onLeaveToday",
        "absentToday",
        "pendingLeaves",
        "pendingMembers",
    }


def test_out_of_range_work_rate_is_bad_request(client, owner_headers):
    body = {
        "full_name": "Big Spender",
        "joining_date": "2025-02-01",
        "employment_type": "daily",
        "phone": "9222222222",
    }
    for rate in ("1e30", "100000000"):
        res = client.post("/api/employees", headers=owner_headers, json={**body, "work_rate": rate})
        assert res.status_code == 400
        assert "Work rate" in res.get_json()["error"]


def test_non_string_password_is_bad_request(client):
    res = client.post("/api/auth/register", json={"email": "boss@example.com", "password": 12345678})
    assert res.status_code == 400

    client.post("/api/auth/register", json={"email": "boss@example.com", "password": "12345678"})
    res = client.post("/api/auth/login", json={"email": "boss@example.com", "password": 12345678})
    assert res.status_code == 400


def test_attendance_rows_use_date_key(client, owner_headers, employee):
    client.post("/api/attendance/clock-in", headers=owner_headers, json={"employee_id": employee.id})

    row = client.get("/api/attendance", headers=owner_headers).get_json()[0]
    assert "date" in row and "attendance_date" not in row

    brk = client.post("/api/attendance/break/start", headers=owner_headers, json={"employee_id": employee.id})
    assert brk.get_json()["data"]["type"] == "General"
    assert client.get("/api/breaks", headers=owner_headers).get_json()[0]["type"] == "General"
