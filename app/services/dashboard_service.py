# app/services/dashboard_service.py
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.repositories.order_repo import OrderRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.product import StaffDashboard
from app.schemas.stats import AdminDashboardSummary
from app.services.product_service import UNCATEGORIZED, to_product_read

logger = logging.getLogger(__name__)


class DashboardService:
    """
    Landing-page data for the two roles.

    The live sales numbers come from StatsService (GET /api/stats);
    this only covers catalog and order counts plus the staff menu.
    """

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
    ):
        self.product_repo = product_repo
        self.order_repo = order_repo

    def admin_summary(self, session: Session) -> AdminDashboardSummary:
        """
        Catalog size, stock on hand and all-time order count.
        Falls back to zeros if the database cannot be read so the
        admin page still loads.
        """
        try:
            return AdminDashboardSummary(
                total_products=self.product_repo.count(session),
                total_stocks=self.product_repo.total_stock(session),
                total_orders=self.order_repo.count(session),
            )
        except SQLAlchemyError:
            logger.exception("Admin dashboard error")
            session.rollback()
            return AdminDashboardSummary()

    def staff_view(self, session: Session) -> StaffDashboard:
        rows = self.product_repo.list_with_categories(session)
        products = [to_product_read(product, category) for product, category in rows]

        # Distinct, in first-seen order
        categories = list(
            dict.fromkeys(
                category.name if category else UNCATEGORIZED for _, category in rows
            )
        )
        return StaffDashboard(products=products, categories=categories)
