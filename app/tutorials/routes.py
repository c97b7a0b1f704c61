from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.search.schemas import SearchRequest
from app.tutorials import handlers
from app.tutorials.schemas import LikeRequest, LikeResponse, TutorialCreate, TutorialOut

router = APIRouter(prefix="/tutorials", tags=["tutorials"])


@router.post("", response_model=TutorialOut, status_code=201)
def create_tutorial(payload: TutorialCreate, db: Session = Depends(get_db)):
    return handlers.create_tutorial(db, **payload.model_dump(mode="json"))


@router.get("", response_model=List[TutorialOut])
def get_tutorials(db: Session = Depends(get_db)):
    return handlers.get_tutorials(db)


@router.get("/featured", response_model=List[TutorialOut])
def get_featured_tutorials(db: Session = Depends(get_db)):
    return handlers.get_featured_tutorials(db)


@router.post("/search", response_model=List[TutorialOut])
def search_tutorials(payload: SearchRequest, db: Session = Depends(get_db)):
    return handlers.search_tutorials(db, payload.query, payload.type, payload.filters)


@router.get("/slug/{slug}", response_model=Optional[TutorialOut])
def get_tutorial_by_slug(slug: str, db: Session = Depends(get_db)):
    """Returns null for an unknown slug; counts a view otherwise."""
    return handlers.get_tutorial_by_slug(db, slug)


@router.post("/{tutorial_id}/like", response_model=LikeResponse)
def like_tutorial(tutorial_id: int, payload: LikeRequest, db: Session = Depends(get_db)):
    return handlers.like_tutorial(db, tutorial_id, payload.user_id)
