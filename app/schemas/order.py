# app/schemas/order.py
import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from sqlmodel import SQLModel


class OrderItemIn(SQLModel):
    """
    Line item as sent by the till. Every field is optional; gaps are
    filled with defaults when the order is saved.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    price: float | None = Field(default=None, ge=0)
    quantity: int | None = Field(default=None, ge=0)
    size: str | None = None
    image: str | None = None


class CustomerIn(SQLModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    phone: str | None = None


class OrderCreate(SQLModel):
    """
    Payload for POST /api/orders (a paid order).

    Rules enforced by the service rather than the schema so the till
    gets a plain message back:
      - items must be non-empty
      - total must be present and non-zero
      - type defaults to "Dine In"
    """

    model_config = ConfigDict(extra="ignore")

    items: list[OrderItemIn] | None = None
    subtotal: float | None = None
    tax: float | None = None
    total: float | None = None
    type: str | None = None
    customer: CustomerIn | None = None


class OrderCreated(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    order_id: uuid.UUID = Field(alias="orderId")
    message: str


class OrderRead(SQLModel):
    """
    Stored order as returned to admins.
    """

    id: uuid.UUID
    items: list[dict[str, Any]]
    subtotal: float
    tax: float
    total: float
    type: str
    customer_name: str
    customer_phone: str
    created_at: datetime


class ReceiptRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    cart: list[dict[str, Any]] | None = None
    order_type: str | None = Field(default=None, alias="orderType")


class ReceiptRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    receipt_id: int = Field(alias="receiptId")
    cart: list[dict[str, Any]]
    order_type: str | None = Field(default=None, alias="orderType")
