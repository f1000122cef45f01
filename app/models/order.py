# app/models/order.py
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field


class Order(SQLModel, table=True):
    """
    Paid order as submitted from the till.

    Orders are write-once: line items are stored as a JSON snapshot
    (name, price, quantity, image) so later menu edits never alter
    historical receipts.
    """

    __tablename__ = "orders"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    items: list[dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Line item snapshot",
    )

    subtotal: float = Field(default=0)
    tax: float = Field(default=0)
    total: float = Field(description="Amount paid")

    # "Dine In" | "Take Out" | anything the till sends
    type: str = Field(
        default="Dine In",
        index=True,
    )

    customer_name: str = Field(default="Guest")
    customer_phone: str = Field(default="N/A")

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        index=True,
        description="Creation timestamp (UTC)",
    )
