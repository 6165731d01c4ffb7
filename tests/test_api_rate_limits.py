import pytest

from app.config import settings
from app.limits import SlidingWindowLimiter, api_limit, auth_limit, report_limit

API = "/api/v1"


@pytest.fixture
def limits_on(monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")
    monkeypatch.setattr(settings, "RATE_LIMIT_ENABLED", True)
    monkeypatch.setattr(api_limit, "limiter", SlidingWindowLimiter(4, 60))
    monkeypatch.setattr(auth_limit, "limiter", SlidingWindowLimiter(50, 60))
    monkeypatch.setattr(report_limit, "limiter", SlidingWindowLimiter(50, 60))


def test_auth_and_report_calls_share_the_general_budget(client, auth_headers, limits_on):
    # Logging in spends the first slot
    headers = auth_headers("manager")

    assert client.get(f"{API}/products", headers=headers).status_code == 200
    assert client.get(f"{API}/reports/inventory", headers=headers).status_code == 200
    assert client.get(f"{API}/auth/profile", headers=headers).status_code == 200

    resp = client.get(f"{API}/auth/profile", headers=headers)
    assert resp.status_code == 429
    body = resp.json()
    assert body["success"] is False
    assert "retryAfter" in body
    assert int(resp.headers["retry-after"]) >= 1
