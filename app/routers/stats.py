# app/routers/stats.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.database import get_session
from app.repositories.stats_repo import StatsRepository
from app.schemas.stats import DashboardStats
from app.services.stats_service import StatsService

router = APIRouter(prefix="/stats", tags=["Stats"])

repo = StatsRepository()
service = StatsService(repo)


@router.get("", response_model=DashboardStats)
def get_dashboard_stats(session: Session = Depends(get_session)):
    """
    Today's sales rollup for the dashboard.

    Returns all-zero values when no order has been placed today.
    A database failure answers 503 instead of zeros.
    """
    return service.get_dashboard_stats(session)
