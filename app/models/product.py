# app/models/product.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Category(SQLModel, table=True):
    """
    Menu section (Rice, Sizzling, Party, ...).
    """

    __tablename__ = "categories"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        unique=True,
        index=True,
        description="Category name (trimmed, unique)",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )


class Product(SQLModel, table=True):
    """
    Menu item sold at the till.

    Names are not unique at the database level; seeding upserts by name.
    """

    __tablename__ = "products"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(
        index=True,
        description="Display name of the dish/drink",
    )

    category_id: uuid.UUID | None = Field(
        default=None,
        foreign_key="categories.id",
        index=True,
        description="FK to categories.id (optional)",
    )

    price: float = Field(
        ge=0,
        description="Unit price (PHP)",
    )

    stock: int = Field(
        default=0,
        ge=0,
        description="Units currently in stock",
    )

    image: str = Field(
        default="",
        description="Image filename served from /images",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
