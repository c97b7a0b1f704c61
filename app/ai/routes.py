from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.ai import handlers
from app.ai.schemas import ChatMessageOut, SendMessageRequest, TutorialSummaryResponse, UsageLimitResponse
from app.db.session import get_db

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/messages", response_model=ChatMessageOut)
def send_message(payload: SendMessageRequest, db: Session = Depends(get_db)):
    return handlers.send_message(
        db,
        payload.user_id,
        payload.message,
        context_type=payload.context_type,
        context_id=payload.context_id,
    )


@router.get("/messages/{user_id}", response_model=List[ChatMessageOut])
def get_chat_history(user_id: int, db: Session = Depends(get_db)):
    return handlers.get_chat_history(db, user_id)


@router.get("/usage/{user_id}", response_model=UsageLimitResponse)
def check_ai_usage_limit(user_id: int, db: Session = Depends(get_db)):
    return handlers.check_ai_usage_limit(db, user_id)


@router.get("/tutorials/{tutorial_id}/summary", response_model=TutorialSummaryResponse)
def generate_tutorial_summary(tutorial_id: int, db: Session = Depends(get_db)):
    return handlers.generate_tutorial_summary(db, tutorial_id)
