"""
Shared fixtures: in-memory SQLite database, fresh tables per test,
and a TestClient running the app lifespan.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-session-cookies")
os.environ["SEED_DEFAULTS"] = "false"

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from app.database import engine
from app.main import app


class FixedClock:
    """Callable clock the tests can move around."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture(autouse=True)
def reset_database():
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield


@pytest.fixture
def session():
    with Session(engine) as session:
        yield session


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def clock():
    return FixedClock(datetime(2025, 3, 14, 12, 30))


@pytest.fixture
def register_and_login(client: TestClient):
    """Create an account with the given role and log the client in."""

    def _login(role: str = "admin", username: str | None = None, password: str = "secret123"):
        username = username or f"{role}-user"
        response = client.post(
            "/register",
            json={"user": username, "pass": password, "role": role},
        )
        assert response.status_code == 201
        response = client.post("/login", json={"user": username, "pass": password})
        assert response.status_code == 200
        return response

    return _login
