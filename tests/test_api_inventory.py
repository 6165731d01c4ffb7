import pytest

API = "/api/v1"


def test_status(client, auth_headers):
    resp = client.get(f"{API}/inventory", headers=auth_headers("viewer"))
    assert resp.status_code == 200
    rows = {row["productId"]: row for row in resp.json()["data"]}
    assert rows["prod_004"]["warehouse"] == "Storage Facility"
    assert rows["prod_004"]["currentStock"] == 150


def test_summary(client, auth_headers):
    resp = client.get(f"{API}/inventory/summary", headers=auth_headers("viewer"))
    data = resp.json()["data"]
    assert data["totalProducts"] == 5
    assert data["lowStockProducts"] == 2
    assert data["outOfStockProducts"] == 0
    assert data["categoryBreakdown"]["Electronics"] == 2
    assert data["totalStockValue"] == round(
        5 * 1200.99 + 3 * 25.99 + 25 * 199.99 + 150 * 8.99 + 12 * 89.99, 2
    )
    assert [m["id"] for m in data["recentMovements"]] == ["log_004", "log_001", "log_002", "log_003"]


def test_logs_are_paginated_newest_first(client, auth_headers):
    resp = client.get(f"{API}/inventory/logs", params={"limit": 3}, headers=auth_headers("viewer"))
    body = resp.json()
    assert [e["id"] for e in body["data"]] == ["log_004", "log_001", "log_002"]
    assert body["pagination"]["total"] == 4
    assert body["pagination"]["totalPages"] == 2


def test_logs_by_product(client, auth_headers):
    resp = client.get(f"{API}/inventory/logs", params={"productId": "prod_001"}, headers=auth_headers("viewer"))
    assert [e["id"] for e in resp.json()["data"]] == ["log_004", "log_001"]


def test_manager_updates_stock(client, auth_headers):
    resp = client.patch(
        f"{API}/inventory/prod_003",
        json={"stock": 20, "reason": "Damaged units"},
        headers=auth_headers("manager"),
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Stock updated successfully"
    assert body["data"]["productId"] == "prod_003"
    assert body["data"]["previousStock"] == 25
    assert body["data"]["updatedStock"] == 20

    latest = client.get(f"{API}/inventory/logs", headers=auth_headers("viewer")).json()["data"][0]
    assert latest["productId"] == "prod_003"
    assert latest["quantity"] == -5
    assert latest["action"] == "update"
    assert latest["reason"] == "Damaged units"
    assert latest["userId"] == "user_manager_001"
    assert latest["warehouseId"] == "wh_main"


def test_admin_may_update_stock(client, auth_headers):
    resp = client.patch(f"{API}/inventory/prod_001", json={"stock": 50}, headers=auth_headers("admin"))
    assert resp.status_code == 200


def test_viewer_may_not_update_stock(client, auth_headers):
    resp = client.patch(f"{API}/inventory/prod_003", json={"stock": 20}, headers=auth_headers("viewer"))
    assert resp.status_code == 403
    product = client.get(f"{API}/products/prod_003", headers=auth_headers("viewer")).json()["data"]
    assert product["stock"] == 25


def test_update_without_token(client):
    assert client.patch(f"{API}/inventory/prod_003", json={"stock": 20}).status_code == 401


@pytest.mark.parametrize("payload", [{"stock": -1}, {"stock": "many"}, {}])
def test_invalid_stock(client, auth_headers, payload):
    resp = client.patch(f"{API}/inventory/prod_003", json=payload, headers=auth_headers("manager"))
    assert resp.status_code == 400
    total = client.get(f"{API}/inventory/logs", headers=auth_headers("viewer")).json()["pagination"]["total"]
    assert total == 4


def test_update_missing_product(client, auth_headers):
    resp = client.patch(f"{API}/inventory/prod_999", json={"stock": 1}, headers=auth_headers("manager"))
    assert resp.status_code == 404
    assert resp.json()["message"] == "Product not found"
