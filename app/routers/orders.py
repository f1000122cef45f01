# app/routers/orders.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.auth import require_admin
from app.database import get_session
from app.repositories.order_repo import OrderRepository
from app.repositories.stats_repo import StatsRepository
from app.schemas.order import (
    OrderCreate,
    OrderCreated,
    OrderRead,
    ReceiptRead,
    ReceiptRequest,
)
from app.services.order_service import OrderService
from app.services.stats_service import StatsService

router = APIRouter(prefix="/orders", tags=["Orders"])
receipts_router = APIRouter(tags=["Orders"])

order_repo = OrderRepository()
stats_service = StatsService(StatsRepository())
service = OrderService(order_repo, stats_service)


@router.post("", response_model=OrderCreated)
def create_order(
    payload: OrderCreate,
    session: Session = Depends(get_session),
):
    """
    Record a paid order from the till.

    The daily stats rollup is updated after the order is saved;
    a failure there is logged and does not affect this response.
    """
    return service.place_order(session, payload)


@router.get(
    "",
    response_model=list[OrderRead],
    dependencies=[Depends(require_admin)],
)
def list_orders(
    session: Session = Depends(get_session),
    skip: int = 0,
    limit: int = 50,
):
    """
    List recent orders (admin only).
    """
    return service.list_orders(session, skip, limit)


@receipts_router.post("/printreceipt", response_model=ReceiptRead)
def print_receipt(payload: ReceiptRequest):
    """
    Return a receipt number for the current cart.
    """
    return service.print_receipt(payload)
