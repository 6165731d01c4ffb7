# tests/conftest.py
import os

# Must be set before app.config is imported
os.environ["ENVIRONMENT"] = "test"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SEED_MOCK_DATA"] = "true"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.clock import FixedClock  # noqa: E402
from app.main import app  # noqa: E402
from app.store import InventoryStore  # noqa: E402

API = "/api/v1"

CREDENTIALS = {
    "admin": ("admin@example.com", "Admin123!"),
    "manager": ("manager@example.com", "Password123"),
    "viewer": ("viewer@example.com", "Viewer123"),
}


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def store(clock):
    """Empty store on a frozen clock."""
    return InventoryStore(clock=clock)


@pytest.fixture
def client():
    # Entering the context runs the lifespan, which builds a freshly seeded store
    with TestClient(app) as c:
        yield c


def login(client: TestClient, role: str) -> str:
    email, password = CREDENTIALS[role]
    resp = client.post(f"{API}/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]["accessToken"]


@pytest.fixture
def auth_headers(client):
    tokens = {}

    def _headers(role: str) -> dict:
        if role not in tokens:
            tokens[role] = login(client, role)
        return {"Authorization": f"Bearer {tokens[role]}"}

    return _headers
