# app/services/order_service.py
import logging
import time
from typing import Any

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.errors import PosError
from app.models.order import Order
from app.repositories.order_repo import OrderRepository
from app.schemas.order import (
    OrderCreate,
    OrderCreated,
    OrderItemIn,
    ReceiptRead,
    ReceiptRequest,
)
from app.services.stats_service import StatsService

logger = logging.getLogger(__name__)

DEFAULT_ORDER_TYPE = "Dine In"
DEFAULT_ITEM_NAME = "Unknown Item"
DEFAULT_ITEM_IMAGE = "default_food.jpg"


class OrderService:
    """
    Business logic for orders.

    Responsibilities:
      - Reject empty orders and orders without a total
      - Fill defaults on line items, type and customer
      - Save the order (its own transaction)
      - Feed the order into the daily stats rollup, best effort:
        a stats failure is logged and never fails the order
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        stats_service: StatsService,
    ):
        self.order_repo = order_repo
        self.stats_service = stats_service

    def place_order(
        self,
        session: Session,
        payload: OrderCreate,
    ) -> OrderCreated:
        """
        Record a paid order.

        Steps:
          1. Validate items / total.
          2. Normalise items and type.
          3. Insert the Order row and commit.
          4. Update the daily stats row (errors logged, not raised).
        """
        if not payload.items:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No items in order",
            )

        if not payload.total:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Total amount is required",
            )

        order_type = payload.type or DEFAULT_ORDER_TYPE
        items = [self._normalize_item(item) for item in payload.items]
        customer = payload.customer

        order = Order(
            items=items,
            subtotal=payload.subtotal or 0,
            tax=payload.tax or 0,
            total=payload.total,
            type=order_type,
            customer_name=(customer and customer.name) or "Guest",
            customer_phone=(customer and customer.phone) or "N/A",
        )

        try:
            order = self.order_repo.create(session, order)
        except SQLAlchemyError as exc:
            session.rollback()
            logger.exception("Order creation error")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to save order to database",
            ) from exc

        order_id = order.id
        logger.info("Order saved: %s", order_id)

        self._record_stats(session, {"items": items, "type": order_type})

        return OrderCreated(
            order_id=order_id,
            message="Payment and order processed successfully",
        )

    def list_orders(
        self,
        session: Session,
        skip: int = 0,
        limit: int = 50,
    ) -> list[Order]:
        """
        Most recent orders first (admin only).
        """
        return self.order_repo.list_recent(session, skip, limit)

    def print_receipt(self, payload: ReceiptRequest) -> ReceiptRead:
        """
        Echo the cart back with a receipt number (epoch milliseconds)
        for the till to print.
        """
        if not payload.cart:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Empty cart",
            )

        return ReceiptRead(
            receipt_id=int(time.time() * 1000),
            cart=payload.cart,
            order_type=payload.order_type,
        )

    # -------- Helpers --------

    def _record_stats(self, session: Session, stats_payload: dict[str, Any]) -> None:
        try:
            self.stats_service.update_stats(session, stats_payload)
        except PosError:
            logger.exception("Stats update error (non-critical)")

    @staticmethod
    def _normalize_item(item: OrderItemIn) -> dict[str, Any]:
        """
        Snapshot of a line item with defaults applied:
        name "Unknown Item", price 0, quantity 1, image "default_food.jpg".
        """
        snapshot: dict[str, Any] = {
            "name": item.name or DEFAULT_ITEM_NAME,
            "price": item.price or 0,
            "quantity": item.quantity or 1,
            "image": item.image or DEFAULT_ITEM_IMAGE,
        }
        if item.size:
            snapshot["size"] = item.size
        return snapshot
