# app/schemas/product.py
import uuid
from datetime import datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class CategoryCreate(SQLModel):
    """
    Payload for creating a menu category.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=100)

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Category name is required")
        return v


class CategoryRead(SQLModel):
    id: uuid.UUID
    name: str
    created_at: datetime


class ProductRead(SQLModel):
    """
    Product as the till shows it: category flattened to its name
    ("Uncategorized" when unset) and a fallback image.
    """

    id: uuid.UUID
    name: str
    price: float
    category: str
    stock: int
    image: str


class ProductImageUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    image: str

    @field_validator("image")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("image cannot be empty")
        return v


class ProductImageUpdated(SQLModel):
    success: bool = True
    product: ProductRead


class StaffDashboard(SQLModel):
    """
    Ordering screen data: the menu and its distinct category names.
    """

    products: list[ProductRead]
    categories: list[str]
