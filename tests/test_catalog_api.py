"""
Tests for default data seeding, the product list and categories.
"""
import uuid

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, select

from app.models.product import Category, Product
from app.models.user import User
from app.repositories.product_repo import ProductRepository
from app.repositories.user_repo import UserRepository
from app.services.seed_service import (
    DEFAULT_CATEGORIES,
    DEFAULT_PRODUCTS,
    SeedService,
)


@pytest.fixture
def seeded(session: Session) -> Session:
    SeedService(ProductRepository(), UserRepository()).seed_defaults(session)
    return session


def test_seed_creates_defaults(seeded: Session):
    categories = seeded.exec(select(Category)).all()
    products = seeded.exec(select(Product)).all()
    users = seeded.exec(select(User)).all()

    assert {c.name for c in categories} == set(DEFAULT_CATEGORIES)
    assert len(products) == len({name for name, *_ in DEFAULT_PRODUCTS})
    assert all(p.stock == 100 for p in products)
    assert {(u.username, u.role) for u in users} == {("admin", "admin"), ("staff", "staff")}


def test_seed_upserts_duplicate_names(seeded: Session):
    """The later Frappe entry replaces the Milk entry of the same name."""
    product = seeded.exec(select(Product).where(Product.name == "Matcha Green Tea HC")).one()
    category = seeded.get(Category, product.category_id)

    assert product.price == 108
    assert category.name == "Frappe"


def test_seed_is_idempotent(seeded: Session):
    before = len(seeded.exec(select(Product)).all())

    SeedService(ProductRepository(), UserRepository()).seed_defaults(seeded)

    assert len(seeded.exec(select(Product)).all()) == before
    assert len(seeded.exec(select(Category)).all()) == len(DEFAULT_CATEGORIES)
    assert len(seeded.exec(select(User)).all()) == 2


def test_seeded_admin_can_log_in(client: TestClient, seeded: Session):
    response = client.post("/login", json={"user": "admin", "pass": "admin123"})

    assert response.status_code == 200
    assert response.json()["role"] == "admin"

    summary = client.get("/admindashboard").json()
    assert summary["totalProducts"] == len({name for name, *_ in DEFAULT_PRODUCTS})
    assert summary["totalStocks"] == 100 * summary["totalProducts"]
    assert summary["totalOrders"] == 0


def test_list_products(client: TestClient, seeded: Session):
    response = client.get("/api/products")

    assert response.status_code == 200
    products = {p["name"]: p for p in response.json()}
    assert products["Sizzling Liempo"]["category"] == "Sizzling"
    assert products["Sizzling Liempo"]["image"] == "liempo.jpg"
    assert products["Plain Rice"]["price"] == 18


def test_list_products_fallbacks(client: TestClient, session: Session):
    session.add(Product(name="Halo-Halo", price=95))
    session.commit()

    product = client.get("/api/products").json()[0]

    assert product["category"] == "Uncategorized"
    assert product["image"] == "default_food.jpg"
    assert product["stock"] == 0


def test_update_product_image(client: TestClient, session: Session):
    product = Product(name="Halo-Halo", price=95)
    session.add(product)
    session.commit()
    session.refresh(product)

    response = client.post(f"/api/products/{product.id}/image", json={"image": "halo.png"})

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["product"]["image"] == "halo.png"


def test_update_image_unknown_product(client: TestClient):
    response = client.post(f"/api/products/{uuid.uuid4()}/image", json={"image": "x.png"})

    assert response.status_code == 404


def test_staff_dashboard(client: TestClient, seeded: Session):
    client.post("/login", json={"user": "staff", "pass": "staff123"})

    response = client.get("/staffdashboard")

    assert response.status_code == 200
    data = response.json()
    assert len(data["products"]) == len({name for name, *_ in DEFAULT_PRODUCTS})
    assert len(data["categories"]) == len(set(data["categories"]))
    assert "Specialties" in data["categories"]


def test_categories(client: TestClient, register_and_login):
    register_and_login("admin")

    created = client.post("/api/categories", json={"name": " Desserts "})
    duplicate = client.post("/api/categories", json={"name": "Desserts"})
    listed = client.get("/api/categories")

    assert created.status_code == 201
    assert created.json()["name"] == "Desserts"
    assert duplicate.status_code == 409
    assert [c["name"] for c in listed.json()] == ["Desserts"]


def test_create_category_requires_admin(client: TestClient, register_and_login):
    register_and_login("staff")

    response = client.post("/api/categories", json={"name": "Desserts"})

    assert response.status_code == 403
