"""
Tests for order submission, receipts and the stats endpoint.
"""
from sqlalchemy.exc import OperationalError
from fastapi.testclient import TestClient
from sqlmodel import Session, select

from app.core.errors import PersistenceError
from app.models.order import Order
from app.routers import orders as orders_router
from app.routers import stats as stats_router


def sample_order(**overrides) -> dict:
    payload = {
        "items": [
            {"name": "Cafe Latte Tall", "price": 108, "quantity": 2, "image": "cafe_latte.jpg"},
            {"name": "Plain Rice", "price": 18, "quantity": 1},
        ],
        "subtotal": 234,
        "tax": 28.08,
        "total": 262.08,
        "type": "Dine In",
        "customer": {"name": "Ana", "phone": "0917"},
    }
    payload.update(overrides)
    return payload


def test_create_order(client: TestClient, session: Session):
    response = client.post("/api/orders", json=sample_order())

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Payment and order processed successfully"

    order = session.exec(select(Order)).one()
    assert str(order.id) == data["orderId"]
    assert order.customer_name == "Ana"
    assert order.items[1] == {
        "name": "Plain Rice",
        "price": 18,
        "quantity": 1,
        "image": "default_food.jpg",
    }


def test_create_order_updates_stats(client: TestClient):
    client.post("/api/orders", json=sample_order())

    stats = client.get("/api/stats").json()

    assert stats["totalOrders"] == 1
    assert stats["ordersToday"] == 1
    assert stats["itemsSoldToday"] == 3
    assert stats["dineInToday"] == 1
    assert stats["categoryStats"]["Cafe"] == 2
    assert stats["totalProducts"] == 2
    assert stats["topProducts"][0] == {"name": "Cafe Latte Tall", "quantity": 2}


def test_create_order_applies_defaults(client: TestClient, session: Session):
    response = client.post(
        "/api/orders",
        json={"items": [{"name": "Soda (Mismo)"}, {}], "total": 56},
    )

    assert response.status_code == 200
    order = session.exec(select(Order)).one()
    assert order.type == "Dine In"
    assert order.customer_name == "Guest"
    assert order.customer_phone == "N/A"
    assert [i["quantity"] for i in order.items] == [1, 1]
    assert order.items[1]["name"] == "Unknown Item"

    stats = client.get("/api/stats").json()
    assert stats["dineInToday"] == 1
    assert stats["itemsSoldToday"] == 2
    assert stats["categoryStats"]["Drink"] == 1


def test_create_order_without_items(client: TestClient, session: Session):
    response = client.post("/api/orders", json=sample_order(items=[]))

    assert response.status_code == 400
    assert response.json()["detail"] == "No items in order"
    assert session.exec(select(Order)).first() is None


def test_create_order_without_total(client: TestClient):
    response = client.post("/api/orders", json=sample_order(total=None))

    assert response.status_code == 400
    assert response.json()["detail"] == "Total amount is required"


def test_stats_failure_does_not_fail_order(client: TestClient, session: Session, monkeypatch):
    def broken_update(session, payload):
        raise PersistenceError("stats store unreachable")

    monkeypatch.setattr(orders_router.stats_service, "update_stats", broken_update)

    response = client.post("/api/orders", json=sample_order())

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert session.exec(select(Order)).first() is not None


def test_stats_empty_day(client: TestClient):
    response = client.get("/api/stats")

    assert response.status_code == 200
    data = response.json()
    assert data["totalOrders"] == 0
    assert data["hourlyStats"] == {}
    assert data["topProducts"] == []
    assert data["categoryStats"] == {
        "Rice": 0, "Sizzling": 0, "Party": 0, "Drink": 0,
        "Cafe": 0, "Milk": 0, "Frappe": 0,
    }


def test_stats_store_failure_returns_503(client: TestClient, monkeypatch):
    def broken_read(session, day, for_update=False):
        raise OperationalError("SELECT daily_stats", {}, Exception("database is down"))

    monkeypatch.setattr(stats_router.service.repo, "get_by_day", broken_read)

    response = client.get("/api/stats")

    assert response.status_code == 503
    assert "error" in response.json()


def test_list_orders_requires_admin(client: TestClient, register_and_login):
    assert client.get("/api/orders").status_code == 401

    register_and_login("staff")
    assert client.get("/api/orders").status_code == 403


def test_list_orders(client: TestClient, register_and_login):
    client.post("/api/orders", json=sample_order())
    client.post("/api/orders", json=sample_order(type="Take Out"))
    register_and_login("admin")

    response = client.get("/api/orders")

    assert response.status_code == 200
    assert {o["type"] for o in response.json()} == {"Dine In", "Take Out"}


def test_print_receipt(client: TestClient):
    cart = [{"name": "Soda (Mismo)", "quantity": 2}]
    response = client.post("/printreceipt", json={"cart": cart, "orderType": "Take Out"})

    assert response.status_code == 200
    data = response.json()
    assert data["cart"] == cart
    assert data["orderType"] == "Take Out"
    assert data["receiptId"] > 0


def test_print_receipt_empty_cart(client: TestClient):
    response = client.post("/printreceipt", json={"cart": []})

    assert response.status_code == 400
    assert response.json()["detail"] == "Empty cart"
