from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.admin import handlers
from app.admin.schemas import DetailedAnalytics, GrantProRequest, ModerateRequest
from app.db.session import get_db
from app.subscriptions.schemas import SuccessResponse, UserIdRequest

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/analytics", response_model=DetailedAnalytics)
def get_detailed_analytics(db: Session = Depends(get_db)):
    return handlers.get_detailed_analytics(db)


@router.post("/grant-pro", response_model=SuccessResponse)
def grant_pro_access(payload: GrantProRequest, db: Session = Depends(get_db)):
    return handlers.grant_pro_access(db, payload.user_id, payload.days)


@router.post("/revoke-pro", response_model=SuccessResponse)
def revoke_pro_access(payload: UserIdRequest, db: Session = Depends(get_db)):
    return handlers.revoke_pro_access(db, payload.user_id)


@router.post("/moderate", response_model=SuccessResponse)
def moderate_content(payload: ModerateRequest, db: Session = Depends(get_db)):
    return handlers.moderate_content(db, payload.content_id, payload.content_type, payload.action)
