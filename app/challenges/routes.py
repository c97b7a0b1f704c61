from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.challenges import handlers
from app.challenges.schemas import (
    CertificateOut,
    CertificateRequest,
    ChallengeCreate,
    ChallengeOut,
    LeaderboardEntry,
    ParticipateRequest,
    ParticipateResponse,
    UserRankResponse,
)
from app.db.session import get_db

router = APIRouter(prefix="/challenges", tags=["challenges"])


@router.post("", response_model=ChallengeOut, status_code=201)
def create_challenge(payload: ChallengeCreate, db: Session = Depends(get_db)):
    return handlers.create_challenge(db, **payload.model_dump())


@router.get("/active", response_model=List[ChallengeOut])
def get_active_challenges(db: Session = Depends(get_db)):
    return handlers.get_active_challenges(db)


@router.get("/leaderboard", response_model=List[LeaderboardEntry])
def get_leaderboard(db: Session = Depends(get_db)):
    return handlers.get_leaderboard(db)


@router.get("/rank/{user_id}", response_model=UserRankResponse)
def get_user_rank(user_id: int, db: Session = Depends(get_db)):
    return handlers.get_user_rank(db, user_id)


@router.post("/{challenge_id}/participate", response_model=ParticipateResponse)
def participate_in_challenge(challenge_id: int, payload: ParticipateRequest, db: Session = Depends(get_db)):
    return handlers.participate_in_challenge(db, payload.user_id, challenge_id)


@router.post("/{challenge_id}/certificate", response_model=CertificateOut)
def issue_certificate(challenge_id: int, payload: CertificateRequest, db: Session = Depends(get_db)):
    return handlers.issue_certificate(db, payload.user_id, challenge_id)
