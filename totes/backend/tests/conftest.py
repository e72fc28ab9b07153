import os
from typing import Dict

import pytest
from fastapi.testclient import TestClient

# Configure before app.config is imported: settings read the environment once.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ADMIN_EMAIL"] = "admin@example.com"
os.environ["ADMIN_PASSWORD"] = "admin12345"
os.environ["SECRET_KEY"] = "test-secret-key"

from app.database import Base, SessionLocal, engine  # noqa: E402
from app.main import app as totes_app  # noqa: E402
from app.models import Permission, Role, UserType  # noqa: E402
from app.services.startup_service import init_db  # noqa: E402
from app.services.user_service import USER_STATE_ACTIVE, UserService  # noqa: E402
from app.utils.auth_internal import create_access_token  # noqa: E402

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin12345"


@pytest.fixture(autouse=True)
def _fresh_database():
    """Every test starts from an empty, freshly seeded database."""
    Base.metadata.drop_all(bind=engine)
    init_db()
    yield


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client():
    return TestClient(totes_app)


@pytest.fixture()
def admin_headers(client) -> Dict[str, str]:
    resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture()
def make_user(db):
    """
    Factory: create an ACTIVE user whose type grants exactly the given
    permission codes and return its auth headers.
    """
    counter = {"n": 0}

    def _make(*codes: int, email: str = None, state_id: int = USER_STATE_ACTIVE) -> Dict[str, str]:
        counter["n"] += 1
        n = counter["n"]
        role = Role(name=f"ROLE_{n}")
        role.permissions = db.query(Permission).filter(Permission.id.in_(codes)).all() if codes else []
        user_type = UserType(name=f"TYPE_{n}", roles=[role])
        db.add_all([role, user_type])
        db.commit()
        user = UserService.create(
            db,
            email or f"clerk{n}@example.com",
            "clerkpass1",
            user_type.id,
            state_id,
        )
        return {"Authorization": f"Bearer {create_access_token(user.id, user.email)}"}

    return _make


@pytest.fixture()
def customer(client, admin_headers) -> Dict:
    resp = client.post(
        "/api/customers/",
        json={
            "customer_name": "Ana",
            "lastname": "Gomez",
            "customer_id": "1032456789",
            "identifier_type_id": 1,
            "email": "ana.gomez@example.com",
            "phone_numbers": "3001234567",
            "address": "Calle 10 # 4-20",
        },
        headers=admin_headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture()
def create_item(client, admin_headers):
    def _create(name: str = "Tote bag", price: str = "10.00", stock: int = 10, item_type_id: int = 1) -> Dict:
        resp = client.post(
            "/api/items/",
            json={
                "name": name,
                "description": f"{name} for tests",
                "stock": stock,
                "selling_price": price,
                "purchase_price": "4.00",
                "item_type_id": item_type_id,
            },
            headers=admin_headers,
        )
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create
