"""Dashboard routes."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from admin_dashboard.auth import get_current_identity
from admin_dashboard.database import get_db
from admin_dashboard.schemas.dashboard import Statistics
from admin_dashboard.services.dashboard_service import DashboardService
from admin_dashboard.tokens import Identity

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/statistics", response_model=Statistics)
def get_statistics(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    """Aggregate user counts for the dashboard."""
    return DashboardService(db).get_statistics()
