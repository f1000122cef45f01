# app/repositories/order_repo.py
from sqlalchemy import func
from sqlmodel import Session, select

from app.models.order import Order


class OrderRepository:
    """
    Data access layer for orders.

    Orders are insert-only; there is no update or delete.
    """

    def create(self, session: Session, order: Order) -> Order:
        """Insert an Order and return the persisted row."""
        session.add(order)
        session.commit()
        session.refresh(order)
        return order

    def list_recent(
        self,
        session: Session,
        skip: int = 0,
        limit: int = 50,
    ) -> list[Order]:
        stmt = select(Order).order_by(Order.created_at.desc()).offset(skip).limit(limit)
        return session.exec(stmt).all()

    def count(self, session: Session) -> int:
        stmt = select(func.count()).select_from(Order)
        value = session.exec(stmt).one()
        return int(value or 0)
