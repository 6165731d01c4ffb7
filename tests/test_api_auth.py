from datetime import datetime, timedelta, timezone

import jwt

from app.config import settings

API = "/api/v1"


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["environment"] == "test"


def test_login_returns_tokens_and_user(client):
    resp = client.post(f"{API}/auth/login", json={"email": "manager@example.com", "password": "Password123"})
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["accessToken"] and data["refreshToken"]
    assert data["user"] == {
        "id": "user_manager_001",
        "email": "manager@example.com",
        "name": "Warehouse Manager",
        "role": "manager",
    }


def test_login_with_wrong_password(client):
    resp = client.post(f"{API}/auth/login", json={"email": "manager@example.com", "password": "nope"})
    assert resp.status_code == 401
    assert resp.json() == {"success": False, "message": "Invalid credentials"}


def test_login_with_malformed_email(client):
    resp = client.post(f"{API}/auth/login", json={"email": "not-an-email", "password": "x"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Validation error"


def test_profile_requires_token(client):
    resp = client.get(f"{API}/auth/profile")
    assert resp.status_code == 401
    assert resp.json()["message"] == "Access token required"


def test_profile_rejects_bad_token(client):
    resp = client.get(f"{API}/auth/profile", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid or expired token"


def test_profile(client, auth_headers):
    resp = client.get(f"{API}/auth/profile", headers=auth_headers("viewer"))
    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["role"] == "viewer"
    assert data["isActive"] is True
    assert "passwordHash" not in data


def test_refresh(client):
    login = client.post(f"{API}/auth/login", json={"email": "viewer@example.com", "password": "Viewer123"})
    refresh_token = login.json()["data"]["refreshToken"]

    resp = client.post(f"{API}/auth/refresh", json={"refreshToken": refresh_token})
    assert resp.status_code == 200
    assert resp.json()["data"]["accessToken"]


def test_refresh_without_token(client):
    resp = client.post(f"{API}/auth/refresh", json={})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Refresh token required"


def test_refresh_with_access_token_is_rejected(client, auth_headers):
    access = auth_headers("viewer")["Authorization"].split()[1]
    resp = client.post(f"{API}/auth/refresh", json={"refreshToken": access})
    assert resp.status_code == 401


def test_register_is_admin_only(client, auth_headers):
    payload = {"email": "new@example.com", "password": "Welcome123", "name": "New Hire"}
    resp = client.post(f"{API}/auth/register", json=payload, headers=auth_headers("manager"))
    assert resp.status_code == 403
    assert resp.json()["message"] == "Insufficient permissions"

    resp = client.post(f"{API}/auth/register", json=payload, headers=auth_headers("admin"))
    assert resp.status_code == 201
    assert resp.json()["data"]["role"] == "viewer"

    login = client.post(f"{API}/auth/login", json={"email": "new@example.com", "password": "Welcome123"})
    assert login.status_code == 200


def test_register_duplicate_email(client, auth_headers):
    payload = {"email": "viewer@example.com", "password": "Welcome123", "name": "Copy"}
    resp = client.post(f"{API}/auth/register", json=payload, headers=auth_headers("admin"))
    assert resp.status_code == 409


def test_register_weak_password(client, auth_headers):
    payload = {"email": "weak@example.com", "password": "alllowercase", "name": "Weak"}
    resp = client.post(f"{API}/auth/register", json=payload, headers=auth_headers("admin"))
    assert resp.status_code == 400


def test_unknown_route(client):
    resp = client.get(f"{API}/nothing-here")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": f"Route {API}/nothing-here not found"}


def test_token_without_subject_is_unauthenticated(client):
    token = jwt.encode(
        {"type": "access", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        settings.JWT_SECRET,
        algorithm="HS256",
    )
    resp = client.get(f"{API}/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid or expired token"


def test_run_serves_the_app_with_uvicorn(monkeypatch):
    import app.main

    calls = []
    monkeypatch.setattr(app.main.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    app.main.run()

    [(args, kwargs)] = calls
    assert args == ("app.main:app",)
    assert kwargs["host"] == settings.HOST
    assert kwargs["port"] == settings.PORT
