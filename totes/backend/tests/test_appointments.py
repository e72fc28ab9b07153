from app.config import settings

SLOT = "2026-11-02T10:00:00"


def _other_customer(client, headers, doc="900123456", email="shop@example.com"):
    resp = client.post(
        "/api/customers/",
        json={
            "customer_name": "Bolsos",
            "lastname": "Ltda",
            "customer_id": doc,
            "identifier_type_id": 2,
            "email": email,
            "is_business": True,
        },
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


def _book(client, headers, customer_id, date_time=SLOT, state=True):
    return client.post(
        "/api/appointments/",
        json={"date_time": date_time, "customer_id": customer_id, "state": state},
        headers=headers,
    )


def test_book_appointment(client, admin_headers, customer):
    resp = _book(client, admin_headers, customer["id"])
    assert resp.status_code == 201, resp.text
    appointment = resp.json()
    assert appointment["date_time"].startswith(SLOT)
    assert appointment["customer_id"] == customer["id"]

    fetched = client.get(f"/api/appointments/{appointment['id']}", headers=admin_headers)
    assert fetched.json()["id"] == appointment["id"]


def test_slot_must_be_on_the_hour_and_within_hours(client, admin_headers, customer):
    assert _book(client, admin_headers, customer["id"], "2026-11-02T10:30:00").status_code == 400
    assert _book(client, admin_headers, customer["id"], "2026-11-02T06:00:00").status_code == 400
    assert _book(client, admin_headers, customer["id"], "2026-11-02T18:00:00").status_code == 400
    assert _book(client, admin_headers, customer["id"], "2026-11-02T17:00:00").status_code == 201


def test_unknown_customer_is_404(client, admin_headers):
    assert _book(client, admin_headers, 999).status_code == 404


def test_same_customer_twice_in_a_slot_is_409(client, admin_headers, customer, monkeypatch):
    monkeypatch.setattr(settings, "APPOINTMENT_SLOT_CAPACITY", 5)
    assert _book(client, admin_headers, customer["id"]).status_code == 201
    resp = _book(client, admin_headers, customer["id"])
    assert resp.status_code == 409
    assert resp.json()["detail"] == "Customer already has an appointment at this time"


def test_full_slot_is_409(client, admin_headers, customer, monkeypatch):
    monkeypatch.setattr(settings, "APPOINTMENT_SLOT_CAPACITY", 2)
    second = _other_customer(client, admin_headers)
    third = _other_customer(client, admin_headers, doc="800555111", email="third@example.com")

    assert _book(client, admin_headers, customer["id"]).status_code == 201
    assert _book(client, admin_headers, second["id"]).status_code == 201
    resp = _book(client, admin_headers, third["id"])
    assert resp.status_code == 409
    assert resp.json()["detail"] == "Appointment slot full"


def test_update_keeps_own_slot(client, admin_headers, customer):
    appointment = _book(client, admin_headers, customer["id"]).json()
    resp = client.put(
        f"/api/appointments/{appointment['id']}",
        json={"date_time": SLOT, "customer_id": customer["id"], "state": False},
        headers=admin_headers,
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["state"] is False

    moved = client.put(
        f"/api/appointments/{appointment['id']}",
        json={"date_time": "2026-11-02T11:00:00", "customer_id": customer["id"]},
        headers=admin_headers,
    )
    assert moved.json()["date_time"].startswith("2026-11-02T11:00:00")

    missing = client.put(
        "/api/appointments/999",
        json={"date_time": SLOT, "customer_id": customer["id"]},
        headers=admin_headers,
    )
    assert missing.status_code == 404


def test_counts_by_hour(client, admin_headers, customer):
    _book(client, admin_headers, customer["id"], "2026-11-02T09:00:00")
    _book(client, admin_headers, customer["id"], "2026-11-02T12:00:00")
    _book(client, admin_headers, customer["id"], "2026-11-03T12:00:00")

    data = client.get("/api/appointments/hours", params={"date": "2026-11-02"}, headers=admin_headers).json()
    assert data["date"] == "2026-11-02"
    assert data["first_hour"] == settings.APPOINTMENT_FIRST_HOUR
    assert len(data["counts"]) == settings.APPOINTMENT_LAST_HOUR - settings.APPOINTMENT_FIRST_HOUR + 1
    assert data["counts"][0] == 1
    assert data["counts"][12 - settings.APPOINTMENT_FIRST_HOUR] == 1
    assert sum(data["counts"]) == 2


def test_lookups_by_customer(client, admin_headers, customer):
    appointment = _book(client, admin_headers, customer["id"]).json()

    by_customer = client.get(f"/api/appointments/customer/{customer['id']}", headers=admin_headers).json()
    assert [a["id"] for a in by_customer] == [appointment["id"]]

    at_slot = client.get(
        f"/api/appointments/customer/{customer['id']}/date",
        params={"date_time": SLOT},
        headers=admin_headers,
    )
    assert [a["id"] for a in at_slot.json()] == [appointment["id"]]

    elsewhere = client.get(
        f"/api/appointments/customer/{customer['id']}/date",
        params={"date_time": "2026-11-02T15:00:00"},
        headers=admin_headers,
    )
    assert elsewhere.status_code == 404
    assert elsewhere.json()["detail"] == "No appointments found"


def test_searches(client, admin_headers, customer):
    active = _book(client, admin_headers, customer["id"]).json()
    _book(client, admin_headers, customer["id"], "2026-11-02T13:00:00", state=False)

    by_name = client.get("/api/appointments/search-by-name", params={"name": "gom"}, headers=admin_headers).json()
    assert len(by_name) == 2

    by_state = client.get("/api/appointments/search-by-state", params={"state": "true"}, headers=admin_headers).json()
    assert [a["id"] for a in by_state] == [active["id"]]

    by_id = client.get("/api/appointments/search-by-id", params={"id": str(active["id"])}, headers=admin_headers)
    assert active["id"] in [a["id"] for a in by_id.json()]

    assert len(client.get("/api/appointments/", headers=admin_headers).json()) == 2


def test_delete_appointment(client, admin_headers, customer):
    appointment = _book(client, admin_headers, customer["id"]).json()
    assert client.delete(f"/api/appointments/{appointment['id']}", headers=admin_headers).status_code == 204
    assert client.get(f"/api/appointments/{appointment['id']}", headers=admin_headers).status_code == 404
    assert client.delete(f"/api/appointments/{appointment['id']}", headers=admin_headers).status_code == 404
