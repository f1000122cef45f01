# app/models/stats.py
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import SQLModel, Field

# Sales buckets reported on the dashboard, in classification order.
CATEGORY_BUCKETS: tuple[str, ...] = (
    "Rice",
    "Sizzling",
    "Party",
    "Drink",
    "Cafe",
    "Milk",
    "Frappe",
)

HOURS: tuple[str, ...] = tuple(str(h) for h in range(24))


def empty_category_stats() -> dict[str, int]:
    return {bucket: 0 for bucket in CATEGORY_BUCKETS}


def empty_hourly_stats() -> dict[str, int]:
    return {hour: 0 for hour in HOURS}


class DailyStats(SQLModel, table=True):
    """
    Per-day rollup record (one row per local calendar day).

    Two kinds of counters live side by side:

      - cumulative (total_orders, items_sold, dine_in_orders, takeout_orders,
        category_stats, hourly_stats, top_products): seeded from the previous
        day's row when a day is first created, never reset.
      - daily (orders_today, items_sold_today): start at 0 for each new day.

    JSON columns are replaced wholesale on update (never mutated in place),
    otherwise SQLAlchemy would not notice the change.
    """

    __tablename__ = "daily_stats"

    id: int | None = Field(default=None, primary_key=True)

    # Local midnight of the day this row covers. All timestamps on this
    # table are naive local time, matching the day key.
    date: datetime = Field(
        sa_column=Column(DateTime(timezone=False), unique=True, index=True, nullable=False),
        description="Day key (local midnight)",
    )

    total_orders: int = Field(default=0, ge=0)
    orders_today: int = Field(default=0, ge=0)

    items_sold: int = Field(default=0, ge=0)
    items_sold_today: int = Field(default=0, ge=0)

    dine_in_orders: int = Field(default=0, ge=0)
    takeout_orders: int = Field(default=0, ge=0)

    category_stats: dict[str, int] = Field(
        default_factory=empty_category_stats,
        sa_column=Column(JSON, nullable=False),
    )

    # [{"name": str, "quantity": int}, ...] sorted by quantity desc, max 10
    top_products: list[dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    # hour ("0".."23") -> orders placed in that hour
    hourly_stats: dict[str, int] = Field(
        default_factory=empty_hourly_stats,
        sa_column=Column(JSON, nullable=False),
    )

    last_updated: datetime = Field(
        default_factory=datetime.now,
        sa_column=Column(DateTime(timezone=False), nullable=False),
    )

    created_at: datetime = Field(
        default_factory=datetime.now,
        sa_column=Column(DateTime(timezone=False), nullable=False),
    )
