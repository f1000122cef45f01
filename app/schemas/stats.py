# app/schemas/stats.py
from pydantic import BaseModel, ConfigDict, Field

from app.models.stats import empty_category_stats


class TopProduct(BaseModel):
    """
    One entry of the top-10 products list (cumulative quantity sold).
    """

    name: str
    quantity: int


class DashboardStats(BaseModel):
    """
    Payload for GET /api/stats.

    Field names are kept for dashboard compatibility even where they
    mislead:
      - totalProducts = number of entries in topProducts (not catalog size)
      - totalStocks   = cumulative items sold (not inventory)
      - dineInToday / takeoutToday = cumulative counts (not today's)
    """

    model_config = ConfigDict(populate_by_name=True)

    total_orders: int = Field(default=0, alias="totalOrders")
    total_products: int = Field(default=0, alias="totalProducts")
    total_stocks: int = Field(default=0, alias="totalStocks")
    orders_today: int = Field(default=0, alias="ordersToday")
    items_sold_today: int = Field(default=0, alias="itemsSoldToday")
    dine_in_today: int = Field(default=0, alias="dineInToday")
    takeout_today: int = Field(default=0, alias="takeoutToday")
    category_stats: dict[str, int] = Field(
        default_factory=empty_category_stats,
        alias="categoryStats",
    )
    hourly_stats: dict[str, int] = Field(default_factory=dict, alias="hourlyStats")
    top_products: list[TopProduct] = Field(default_factory=list, alias="topProducts")


class AdminDashboardSummary(BaseModel):
    """
    Catalog/order counters shown on the admin landing page.
    """

    model_config = ConfigDict(populate_by_name=True)

    total_products: int = Field(default=0, alias="totalProducts")
    total_stocks: int = Field(default=0, alias="totalStocks")
    total_orders: int = Field(default=0, alias="totalOrders")
