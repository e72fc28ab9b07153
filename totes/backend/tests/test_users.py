from app.models import UserType
from app.permission_config import PERMISSION_CREATE_USER, PERMISSION_GET_ALL_ITEMS
from app.services.user_service import USER_STATE_INACTIVE


def _admin_type_id(db):
    return db.query(UserType).filter(UserType.name == "ADMIN").one().id


def test_create_user_and_fetch(client, admin_headers, db):
    body = {"email": "Seller@Example.com", "password": "sellerpass1", "user_type_id": _admin_type_id(db)}
    resp = client.post("/api/users/", json=body, headers=admin_headers)
    assert resp.status_code == 201, resp.text
    user = resp.json()
    assert user["email"] == "seller@example.com"
    assert user["user_state_type_id"] == 1
    assert "password_hash" not in user

    fetched = client.get(f"/api/users/{user['id']}", headers=admin_headers)
    assert fetched.status_code == 200
    assert fetched.json()["email"] == "seller@example.com"


def test_create_user_duplicate_email_is_409(client, admin_headers, db):
    body = {"email": "admin@example.com", "password": "another1pass", "user_type_id": _admin_type_id(db)}
    resp = client.post("/api/users/", json=body, headers=admin_headers)
    assert resp.status_code == 409


def test_create_user_weak_password_is_400(client, admin_headers, db):
    body = {"email": "weak@example.com", "password": "onlyletters", "user_type_id": _admin_type_id(db)}
    resp = client.post("/api/users/", json=body, headers=admin_headers)
    assert resp.status_code == 400


def test_create_user_unknown_type_is_400(client, admin_headers):
    body = {"email": "typo@example.com", "password": "goodpass123", "user_type_id": 999}
    resp = client.post("/api/users/", json=body, headers=admin_headers)
    assert resp.status_code == 400


def test_update_user_and_state(client, admin_headers, db):
    type_id = _admin_type_id(db)
    created = client.post(
        "/api/users/",
        json={"email": "temp@example.com", "password": "temppass12", "user_type_id": type_id},
        headers=admin_headers,
    ).json()

    resp = client.put(
        f"/api/users/{created['id']}",
        json={"email": "renamed@example.com", "user_type_id": type_id},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    assert resp.json()["email"] == "renamed@example.com"

    resp = client.patch(
        f"/api/users/{created['id']}/state",
        json={"user_state_type_id": USER_STATE_INACTIVE},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    assert resp.json()["user_state_type_id"] == USER_STATE_INACTIVE

    login = client.post("/api/auth/login", json={"email": "renamed@example.com", "password": "temppass12"})
    assert login.status_code == 401


def test_search_users(client, admin_headers):
    resp = client.get("/api/users/search-by-email", params={"email": "ADMIN"}, headers=admin_headers)
    assert [u["email"] for u in resp.json()] == ["admin@example.com"]

    resp = client.get("/api/users/search-by-id", params={"id": "1"}, headers=admin_headers)
    assert [u["id"] for u in resp.json()] == [1]


def test_user_has_permission(client, admin_headers, make_user):
    make_user(PERMISSION_GET_ALL_ITEMS, email="limited@example.com")
    users = client.get("/api/users/search-by-email", params={"email": "limited"}, headers=admin_headers).json()
    user_id = users[0]["id"]

    granted = client.get(f"/api/users/{user_id}/permissions/{PERMISSION_GET_ALL_ITEMS}", headers=admin_headers)
    assert granted.json() == {"user_id": user_id, "permission_id": PERMISSION_GET_ALL_ITEMS, "has_permission": True}

    denied = client.get(f"/api/users/{user_id}/permissions/{PERMISSION_CREATE_USER}", headers=admin_headers)
    assert denied.json()["has_permission"] is False


def test_roles_and_user_types(client, admin_headers):
    roles = client.get("/api/roles/", headers=admin_headers).json()
    admin_role = next(r for r in roles if r["name"] == "ADMINISTRATOR")
    assert PERMISSION_CREATE_USER in admin_role["permissions"]

    perms = client.get(f"/api/roles/{admin_role['id']}/permissions", headers=admin_headers).json()
    assert {p["id"] for p in perms} == set(admin_role["permissions"])

    assert client.get(f"/api/roles/{admin_role['id']}/exists", headers=admin_headers).json() == {"exists": True}
    assert client.get("/api/roles/999/exists", headers=admin_headers).json() == {"exists": False}
    assert client.get("/api/roles/999", headers=admin_headers).status_code == 404

    found = client.get("/api/roles/search-by-name", params={"name": "admin"}, headers=admin_headers).json()
    assert [r["name"] for r in found] == ["ADMINISTRATOR"]

    user_types = client.get("/api/user-types/search-by-name", params={"name": "adm"}, headers=admin_headers).json()
    assert user_types[0]["roles"] == [admin_role["id"]]


def test_permissions_catalog(client, admin_headers):
    resp = client.get(f"/api/permissions/{PERMISSION_GET_ALL_ITEMS}", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["name"] == "get_all_items"

    assert client.get("/api/permissions/1", headers=admin_headers).status_code == 404

    by_name = client.get("/api/permissions/search-by-name", params={"name": "purchase_order"}, headers=admin_headers)
    assert all("purchase_order" in p["name"] for p in by_name.json())
    assert len(by_name.json()) == 9


def test_user_state_types_and_logs(client, admin_headers):
    states = client.get("/api/user-state-types/", headers=admin_headers).json()
    assert [s["description"] for s in states] == ["ACTIVE", "INACTIVE", "BLOCKED"]

    logs = client.get("/api/user-logs/admin@example.com", headers=admin_headers).json()
    assert logs[0]["log"] == "Attempting to get all logs from user"
    assert logs[0]["id"] > logs[-1]["id"]


def test_user_logs_lookup_ignores_email_case(client, admin_headers):
    logs = client.get("/api/user-logs/Admin@Example.com", headers=admin_headers).json()
    assert logs
    assert {entry["user_email"] for entry in logs} == {"admin@example.com"}
