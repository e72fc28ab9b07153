def _customer_body(**overrides):
    body = {
        "customer_name": "Luis",
        "lastname": "Perez",
        "customer_id": "79111222",
        "identifier_type_id": 1,
        "email": "luis.perez@example.com",
    }
    body.update(overrides)
    return body


def _employee_body(**overrides):
    body = {
        "names": "Marta",
        "last_names": "Rios",
        "personal_id": "52000111",
        "identifier_type_id": 1,
        "phone_numbers": "3109876543",
    }
    body.update(overrides)
    return body


# Customers

def test_customer_duplicates_are_409(client, admin_headers, customer):
    same_doc = _customer_body(customer_id=customer["customer_id"])
    assert client.post("/api/customers/", json=same_doc, headers=admin_headers).status_code == 409

    same_email = _customer_body(email="ANA.GOMEZ@example.com")
    assert client.post("/api/customers/", json=same_email, headers=admin_headers).status_code == 409


def test_customer_unknown_identifier_type_is_400(client, admin_headers):
    body = _customer_body(identifier_type_id=99)
    assert client.post("/api/customers/", json=body, headers=admin_headers).status_code == 400


def test_customer_invalid_email_is_422(client, admin_headers):
    body = _customer_body(email="not-an-email")
    assert client.post("/api/customers/", json=body, headers=admin_headers).status_code == 422


def test_customer_lookups(client, admin_headers, customer):
    by_email = client.get("/api/customers/by-email/Ana.Gomez@example.com", headers=admin_headers)
    assert by_email.json()["id"] == customer["id"]

    by_doc = client.get(f"/api/customers/by-customer-id/{customer['customer_id']}", headers=admin_headers)
    assert by_doc.json()["id"] == customer["id"]

    assert client.get("/api/customers/by-email/nobody@example.com", headers=admin_headers).status_code == 404
    assert client.get("/api/customers/by-customer-id/000", headers=admin_headers).status_code == 404
    assert client.get("/api/customers/999", headers=admin_headers).status_code == 404


def test_customer_searches(client, admin_headers, customer):
    client.post("/api/customers/", json=_customer_body(), headers=admin_headers)

    by_name = client.get("/api/customers/search-by-name", params={"name": "an"}, headers=admin_headers).json()
    assert [c["customer_name"] for c in by_name] == ["Ana"]

    by_lastname = client.get("/api/customers/search-by-lastname", params={"lastname": "PER"}, headers=admin_headers)
    assert [c["lastname"] for c in by_lastname.json()] == ["Perez"]

    by_id = client.get("/api/customers/search-by-id", params={"id": str(customer["id"])}, headers=admin_headers)
    assert customer["id"] in [c["id"] for c in by_id.json()]

    assert len(client.get("/api/customers/", headers=admin_headers).json()) == 2


def test_update_customer(client, admin_headers, customer):
    body = _customer_body(customer_id=customer["customer_id"], email=customer["email"], phone_numbers="111")
    resp = client.put(f"/api/customers/{customer['id']}", json=body, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["customer_name"] == "Luis"
    assert resp.json()["phone_numbers"] == "111"

    other = _customer_body(customer_id="1", email="x@example.com")
    assert client.post("/api/customers/", json=other, headers=admin_headers).status_code == 201
    clash = _customer_body(customer_id="1", email=customer["email"])
    assert client.put(f"/api/customers/{customer['id']}", json=clash, headers=admin_headers).status_code == 409


# Employees

def test_employee_crud(client, admin_headers):
    created = client.post("/api/employees/", json=_employee_body(user_id=1), headers=admin_headers)
    assert created.status_code == 201, created.text
    employee = created.json()
    assert employee["user_id"] == 1

    body = _employee_body(user_id=1, residential_address="Carrera 7")
    updated = client.put(f"/api/employees/{employee['id']}", json=body, headers=admin_headers)
    assert updated.status_code == 200
    assert updated.json()["residential_address"] == "Carrera 7"

    by_name = client.get("/api/employees/search-by-name", params={"name": "rios"}, headers=admin_headers).json()
    assert [e["id"] for e in by_name] == [employee["id"]]

    assert client.delete(f"/api/employees/{employee['id']}", headers=admin_headers).status_code == 204
    assert client.get(f"/api/employees/{employee['id']}", headers=admin_headers).status_code == 404


def test_employee_conflicts(client, admin_headers):
    assert client.post("/api/employees/", json=_employee_body(user_id=1), headers=admin_headers).status_code == 201

    same_doc = _employee_body(last_names="Other")
    assert client.post("/api/employees/", json=same_doc, headers=admin_headers).status_code == 409

    same_user = _employee_body(personal_id="52000999", user_id=1)
    assert client.post("/api/employees/", json=same_user, headers=admin_headers).status_code == 409

    ghost_user = _employee_body(personal_id="52000888", user_id=404)
    assert client.post("/api/employees/", json=ghost_user, headers=admin_headers).status_code == 404

    bad_type = _employee_body(personal_id="52000777", identifier_type_id=42)
    assert client.post("/api/employees/", json=bad_type, headers=admin_headers).status_code == 400


# Comments

def test_comments(client, admin_headers):
    body = {"name": "Sofia", "email": "Sofia@Example.com", "comment": "Great bags"}
    created = client.post("/api/comments/", json=body, headers=admin_headers)
    assert created.status_code == 201
    comment = created.json()
    assert comment["email"] == "sofia@example.com"

    body["comment"] = "Great bags, slow delivery"
    updated = client.put(f"/api/comments/{comment['id']}", json=body, headers=admin_headers)
    assert updated.json()["comment"] == "Great bags, slow delivery"

    by_email = client.get("/api/comments/search-by-email", params={"email": "sofia"}, headers=admin_headers).json()
    assert [c["id"] for c in by_email] == [comment["id"]]
    by_name = client.get("/api/comments/search-by-name", params={"name": "SOF"}, headers=admin_headers).json()
    assert [c["id"] for c in by_name] == [comment["id"]]

    assert client.get(f"/api/comments/{comment['id']}", headers=admin_headers).status_code == 200
    assert client.get("/api/comments/999", headers=admin_headers).status_code == 404
    assert client.post("/api/comments/", json={"name": "x", "email": "x@example.com", "comment": ""}, headers=admin_headers).status_code == 422


def test_identifier_types(client, admin_headers):
    types = client.get("/api/identifier-types/", headers=admin_headers).json()
    assert [t["name"] for t in types] == ["CC", "NIT", "CE", "PASSPORT"]
    assert client.get("/api/identifier-types/2", headers=admin_headers).json()["name"] == "NIT"
    assert client.get("/api/identifier-types/50", headers=admin_headers).status_code == 404
