# app/routers/dashboard.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.core.auth import require_admin, require_staff
from app.database import get_session
from app.repositories.order_repo import OrderRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.product import StaffDashboard
from app.schemas.stats import AdminDashboardSummary
from app.services.dashboard_service import DashboardService

router = APIRouter(tags=["Dashboards"])

service = DashboardService(ProductRepository(), OrderRepository())


@router.get(
    "/admindashboard",
    response_model=AdminDashboardSummary,
    dependencies=[Depends(require_admin)],
)
def admin_dashboard(session: Session = Depends(get_session)):
    """
    Catalog and order counters for the admin landing page.

    Staff are answered 403 with a pointer to /staffdashboard.
    """
    return service.admin_summary(session)


@router.get(
    "/staffdashboard",
    response_model=StaffDashboard,
    dependencies=[Depends(require_staff)],
)
def staff_dashboard(session: Session = Depends(get_session)):
    """
    Menu and category list for the ordering screen.
    """
    return service.staff_view(session)
