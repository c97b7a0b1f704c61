from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.dashboard import handlers
from app.dashboard.schemas import Analytics, DashboardData
from app.db.session import get_db

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/analytics", response_model=Analytics)
def get_analytics(db: Session = Depends(get_db)):
    return handlers.get_analytics(db)


@router.get("/{user_id}", response_model=DashboardData)
def get_dashboard_data(user_id: int, db: Session = Depends(get_db)):
    return handlers.get_dashboard_data(db, user_id)
