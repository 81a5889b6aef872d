"""Integration tests for the HTTP API via TestClient."""

import pytest
from fastapi.testclient import TestClient

from storefront.infrastructure.api import create_app
from storefront.infrastructure.bootstrap import build_container
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.memory_order_repository import (
    InMemoryOrderRepository,
)
from storefront.infrastructure.persistence.memory_product_repository import (
    InMemoryProductRepository,
)
from tests.fakes import StepClock, order_payload, product_payload


def _client(**settings) -> TestClient:
    container = build_container(
        Settings(seed_catalog=False, log_level="WARNING", **settings),
        product_repo=InMemoryProductRepository(),
        order_repo=InMemoryOrderRepository(clock=StepClock()),
    )
    return TestClient(create_app(container=container))


@pytest.fixture()
def client():
    return _client()


def _create_product(client, **overrides) -> dict:
    response = client.post("/api/products", json=product_payload(**overrides))
    assert response.status_code == 201
    return response.json()


def _create_order(client, **overrides) -> dict:
    response = client.post("/api/orders", json=order_payload(**overrides))
    assert response.status_code == 201
    return response.json()


class TestProductEndpoints:

    def test_create_and_get(self, client):
        created = _create_product(client)
        assert created["imageUrl"] == "/images/curd.png"
        assert created["inStock"] is True

        response = client.get(f"/api/products/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_list(self, client):
        _create_product(client, name="A")
        _create_product(client, name="B")
        assert [p["name"] for p in client.get("/api/products").json()] == ["A", "B"]

    def test_get_unknown_is_404(self, client):
        response = client.get("/api/products/missing")
        assert response.status_code == 404
        assert "not found" in response.json()["detail"]

    def test_invalid_price_is_422(self, client):
        response = client.post("/api/products", json=product_payload(price="cheap"))
        assert response.status_code == 422

    def test_missing_field_is_422(self, client):
        payload = product_payload()
        del payload["name"]
        assert client.post("/api/products", json=payload).status_code == 422

    def test_patch_merges(self, client):
        created = _create_product(client)
        response = client.patch(f"/api/products/{created['id']}", json={"price": "99"})

        assert response.status_code == 200
        assert response.json() == {**created, "price": "99"}

    def test_patch_unknown_field_is_422(self, client):
        created = _create_product(client)
        response = client.patch(f"/api/products/{created['id']}", json={"id": "new"})
        assert response.status_code == 422

    def test_patch_unknown_product_is_404(self, client):
        assert client.patch("/api/products/missing", json={"price": "1"}).status_code == 404

    def test_delete_twice(self, client):
        created = _create_product(client)
        assert client.delete(f"/api/products/{created['id']}").json() == {"deleted": True}
        assert client.delete(f"/api/products/{created['id']}").json() == {"deleted": False}
        assert client.get(f"/api/products/{created['id']}").status_code == 404


class TestOrderEndpoints:

    def test_create_forces_pending_and_keeps_total(self, client):
        order = _create_order(client, status="completed", total="1.00")
        assert order["status"] == "pending"
        assert order["total"] == "1.00"
        assert order["items"][1] == {
            "productId": "p-b",
            "productName": "Product B",
            "quantity": 1,
            "price": "5.50",
        }

    def test_items_as_serialized_text(self, client):
        payload = order_payload()
        payload["items"] = (
            '[{"productId": "p-a", "productName": "A", "quantity": 1, "price": "25.50"}]'
        )
        response = client.post("/api/orders", json=payload)
        assert response.status_code == 201
        assert response.json()["items"][0]["productName"] == "A"

    def test_list_newest_first(self, client):
        first = _create_order(client)
        second = _create_order(client)
        assert [o["id"] for o in client.get("/api/orders").json()] == [second["id"], first["id"]]

    def test_get(self, client):
        order = _create_order(client)
        assert client.get(f"/api/orders/{order['id']}").json() == order
        assert client.get("/api/orders/missing").status_code == 404

    def test_status_update(self, client):
        order = _create_order(client)
        response = client.patch(f"/api/orders/{order['id']}", json={"status": "shipped"})
        assert response.status_code == 200
        assert response.json()["status"] == "shipped"

    def test_unknown_status_is_422(self, client):
        order = _create_order(client)
        response = client.patch(f"/api/orders/{order['id']}", json={"status": "lost"})
        assert response.status_code == 422

    def test_status_update_unknown_order_is_404(self, client):
        assert client.patch("/api/orders/missing", json={"status": "shipped"}).status_code == 404

    def test_strict_transitions_reject_reopening(self):
        client = _client(strict_transitions=True)
        order = _create_order(client)
        for status in ("processing", "shipped", "completed"):
            client.patch(f"/api/orders/{order['id']}", json={"status": status})

        response = client.patch(f"/api/orders/{order['id']}", json={"status": "pending"})
        assert response.status_code == 422
        assert "from 'completed' to 'pending'" in response.json()["detail"]

    def test_verified_totals_reject_mismatch(self):
        client = _client(verify_totals=True)
        curd = _create_product(client)
        items = [{"productId": curd["id"], "productName": curd["name"], "quantity": 2, "price": "100"}]

        accepted = client.post("/api/orders", json=order_payload(items=items, total="200.00"))
        rejected = client.post("/api/orders", json=order_payload(items=items, total="30.00"))

        assert accepted.status_code == 201
        assert rejected.status_code == 422
        assert "does not match" in rejected.json()["detail"]


class TestDashboardEndpoint:

    def test_summary(self, client):
        _create_order(client)
        _create_order(client, total="4.50")

        body = client.get("/api/dashboard").json()
        assert body["totalSales"] == "30.00"
        assert body["totalOrders"] == 2
        assert len(body["recentOrders"]) == 2
        assert len(body["dailySales"]) == 7
