"""
Tests for registration, login cookie and role-guarded dashboards.
"""
from datetime import timedelta

from fastapi.testclient import TestClient
from sqlmodel import Session, select

from app.core.security import create_access_token, verify_password
from app.models.user import User


def test_register(client: TestClient, session: Session):
    response = client.post("/register", json={"user": "  maria ", "pass": "pw-123"})

    assert response.status_code == 201
    data = response.json()
    assert data["username"] == "maria"
    assert data["role"] == "staff"
    assert "password_hash" not in data

    user = session.exec(select(User)).one()
    assert user.password_hash != "pw-123"
    assert verify_password("pw-123", user.password_hash)


def test_register_with_form(client: TestClient):
    response = client.post(
        "/register",
        data={"user": "jose", "pass": "pw-123", "role": "admin"},
    )

    assert response.status_code == 201
    assert response.json()["role"] == "admin"


def test_register_requires_username_and_password(client: TestClient):
    response = client.post("/register", json={"user": "maria"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Username and password required"


def test_register_duplicate(client: TestClient):
    client.post("/register", json={"user": "maria", "pass": "pw-123"})

    response = client.post("/register", json={"user": "maria", "pass": "other"})

    assert response.status_code == 409


def test_register_unknown_role(client: TestClient):
    response = client.post("/register", json={"user": "maria", "pass": "pw", "role": "owner"})

    assert response.status_code == 422


def test_login_sets_cookie(client: TestClient):
    client.post("/register", json={"user": "boss", "pass": "pw-123", "role": "admin"})

    response = client.post("/login", data={"user": "boss", "pass": "pw-123"})

    assert response.status_code == 200
    assert response.json()["redirect"] == "/admindashboard"
    assert client.cookies.get("token")
    assert "httponly" in response.headers["set-cookie"].lower()


def test_login_unknown_user(client: TestClient):
    response = client.post("/login", json={"user": "ghost", "pass": "pw"})

    assert response.status_code == 404


def test_login_wrong_password(client: TestClient):
    client.post("/register", json={"user": "maria", "pass": "pw-123"})

    response = client.post("/login", json={"user": "maria", "pass": "nope"})

    assert response.status_code == 401
    assert "token" not in client.cookies


def test_me(client: TestClient, register_and_login):
    register_and_login("staff", username="cashier")

    response = client.get("/me")

    assert response.status_code == 200
    assert response.json()["username"] == "cashier"


def test_logout_clears_cookie(client: TestClient, register_and_login):
    register_and_login("staff")

    response = client.get("/logout")

    assert response.status_code == 200
    assert "token" not in client.cookies
    assert client.get("/me").status_code == 401


def test_invalid_token_is_rejected(client: TestClient):
    client.cookies.set("token", "not-a-jwt")

    response = client.get("/me")

    assert response.status_code == 401
    assert "token=" in response.headers["set-cookie"]


def test_expired_token_is_rejected(client: TestClient, session: Session, register_and_login):
    register_and_login("staff", username="cashier")
    user = session.exec(select(User)).one()
    expired = create_access_token(
        {"id": str(user.id), "username": user.username, "role": user.role},
        expires_delta=timedelta(seconds=-1),
    )
    client.cookies.clear()
    client.cookies.set("token", expired)

    assert client.get("/me").status_code == 401


def test_admin_dashboard(client: TestClient, register_and_login):
    register_and_login("admin")

    response = client.get("/admindashboard")

    assert response.status_code == 200
    assert response.json() == {"totalProducts": 0, "totalStocks": 0, "totalOrders": 0}


def test_admin_dashboard_rejects_staff(client: TestClient, register_and_login):
    register_and_login("staff")

    response = client.get("/admindashboard")

    assert response.status_code == 403
    assert response.json()["detail"]["redirect"] == "/staffdashboard"


def test_staff_dashboard_rejects_admin(client: TestClient, register_and_login):
    register_and_login("admin")

    response = client.get("/staffdashboard")

    assert response.status_code == 403
    assert response.json()["detail"]["redirect"] == "/admindashboard"


def test_dashboards_require_login(client: TestClient):
    assert client.get("/admindashboard").status_code == 401
    assert client.get("/staffdashboard").status_code == 401
