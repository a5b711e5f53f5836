import pytest

STAFF_LOGIN = {"email": "staff@smilecare.com", "password": "password123"}

def auth_header(token):
    return {"Authorization": f"Bearer {token}"}

def register_client(client, name="Ann", email="ann@x.com", password="pw123456"):
    response = client.post(
        "/api/v1/auth/register",
        json={"name": name, "email": email, "password": password, "phone": "555"}
    )
    return response.json()["token"]

def staff_token(client):
    return client.post("/api/v1/auth/login", json=STAFF_LOGIN).json()["token"]

class TestClientAppointments:

    def test_book_appointment(self, client):
        token = register_client(client)

        response = client.post(
            "/api/v1/appointments",
            json={"date": "2025-05-02", "time": "09:30", "reason": "Cleaning"},
            headers=auth_header(token),
        )
        assert response.status_code == 200

        data = response.json()
        assert data["date"] == "2025-05-02"
        assert data["time"] == "09:30"
        assert data["reason"] == "Cleaning"

        me = client.get("/api/v1/me", headers=auth_header(token)).json()
        assert data["user_id"] == me["id"]

    def test_list_is_ordered_and_private(self, client):
        ann = register_client(client)
        bo = register_client(client, name="Bo", email="bo@x.com")

        for date, time in [("2025-06-01", "14:00"), ("2025-05-01", "10:00"), ("2025-05-01", "08:15")]:
            client.post(
                "/api/v1/appointments",
                json={"date": date, "time": time, "reason": "Checkup"},
                headers=auth_header(ann),
            )
        client.post(
            "/api/v1/appointments",
            json={"date": "2025-01-01", "time": "09:00", "reason": "Filling"},
            headers=auth_header(bo),
        )

        listed = client.get("/api/v1/appointments", headers=auth_header(ann)).json()
        assert [(a["date"], a["time"]) for a in listed] == [
            ("2025-05-01", "08:15"),
            ("2025-05-01", "10:00"),
            ("2025-06-01", "14:00"),
        ]

    def test_double_booking_is_allowed(self, client):
        ann = register_client(client)
        bo = register_client(client, name="Bo", email="bo@x.com")
        slot = {"date": "2025-05-02", "time": "09:30", "reason": "Cleaning"}

        assert client.post("/api/v1/appointments", json=slot, headers=auth_header(ann)).status_code == 200
        assert client.post("/api/v1/appointments", json=slot, headers=auth_header(bo)).status_code == 200

    @pytest.mark.parametrize("payload", [
        {"time": "09:30", "reason": "Cleaning"},
        {"date": "2025-05-02", "reason": "Cleaning"},
        {"date": "2025-05-02", "time": "09:30"},
        {"date": "2025-05-02", "time": "09:30", "reason": "  "},
    ])
    def test_book_missing_field(self, client, payload):
        token = register_client(client)

        response = client.post("/api/v1/appointments", json=payload, headers=auth_header(token))
        assert response.status_code == 400
        assert response.json()["detail"] == "date, time, reason are required"

    def test_book_invalid_date(self, client):
        token = register_client(client)

        response = client.post(
            "/api/v1/appointments",
            json={"date": "next tuesday", "time": "09:30", "reason": "Cleaning"},
            headers=auth_header(token),
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid request body: date"

    def test_book_requires_session(self, client):
        response = client.post(
            "/api/v1/appointments",
            json={"date": "2025-05-02", "time": "09:30", "reason": "Cleaning"},
        )
        assert response.status_code == 401

    def test_staff_cannot_book(self, client):
        response = client.post(
            "/api/v1/appointments",
            json={"date": "2025-05-02", "time": "09:30", "reason": "Cleaning"},
            headers=auth_header(staff_token(client)),
        )
        assert response.status_code == 403
        assert response.json()["detail"] == "Forbidden"

class TestStaffViews:

    def test_staff_lists_all_appointments(self, client):
        ann = register_client(client)
        client.post(
            "/api/v1/appointments",
            json={"date": "2025-05-02", "time": "09:30", "reason": "Cleaning"},
            headers=auth_header(ann),
        )

        response = client.get("/api/v1/staff/appointments", headers=auth_header(staff_token(client)))
        assert response.status_code == 200

        rows = response.json()
        assert len(rows) == 1
        assert rows[0]["patient_name"] == "Ann"
        assert rows[0]["patient_email"] == "ann@x.com"
        assert rows[0]["reason"] == "Cleaning"

    def test_staff_lists_patients_only(self, client):
        register_client(client, name="Zed", email="zed@x.com")
        register_client(client, name="Ann", email="ann@x.com")

        response = client.get("/api/v1/staff/patients", headers=auth_header(staff_token(client)))
        assert response.status_code == 200

        patients = response.json()
        assert [p["name"] for p in patients] == ["Ann", "Zed"]
        assert all("role" not in p and "password_hash" not in p for p in patients)

    @pytest.mark.parametrize("path", ["/api/v1/staff/appointments", "/api/v1/staff/patients"])
    def test_client_is_forbidden(self, client, path):
        token = register_client(client)

        response = client.get(path, headers=auth_header(token))
        assert response.status_code == 403

    @pytest.mark.parametrize("path", ["/api/v1/staff/appointments", "/api/v1/staff/patients"])
    def test_anonymous_is_unauthenticated(self, client, path):
        response = client.get(path)
        assert response.status_code == 401

    def test_staff_sees_times_as_hours_and_minutes(self, client):
        ann = register_client(client)
        client.post(
            "/api/v1/appointments",
            json={"date": "2025-05-02", "time": "14:05", "reason": "Crown"},
            headers=auth_header(ann),
        )

        rows = client.get("/api/v1/staff/appointments", headers=auth_header(staff_token(client))).json()
        assert rows[0]["time"] == "14:05"
