from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.auth.schemas import UserOut
from app.db.session import get_db
from app.subscriptions import handlers
from app.subscriptions.schemas import (
    ProAccessResponse,
    SubscriptionCreate,
    SubscriptionResponse,
    SuccessResponse,
    UserIdRequest,
)

router = APIRouter(prefix="/subscriptions", tags=["subscriptions"])


@router.post("", response_model=SubscriptionResponse)
def create_subscription(payload: SubscriptionCreate, db: Session = Depends(get_db)):
    return handlers.create_subscription(
        db,
        payload.user_id,
        payload.duration,
        payment_method_id=payload.payment_method_id,
        plan=payload.plan,
    )


@router.post("/cancel", response_model=SuccessResponse)
def cancel_subscription(payload: UserIdRequest, db: Session = Depends(get_db)):
    return handlers.cancel_subscription(db, payload.user_id)


@router.post("/upgrade-winner", response_model=UserOut)
def upgrade_winner(payload: UserIdRequest, db: Session = Depends(get_db)):
    return handlers.upgrade_winner(db, payload.user_id)


@router.get("/access/{user_id}", response_model=ProAccessResponse)
def check_pro_access(user_id: int, db: Session = Depends(get_db)):
    return handlers.check_pro_access(db, user_id)
