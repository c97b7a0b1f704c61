from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.roadmaps import handlers
from app.roadmaps.schemas import ProgressUpdate, RoadmapCreate, RoadmapOut, UserProgressOut

router = APIRouter(prefix="/roadmaps", tags=["roadmaps"])


@router.post("", response_model=RoadmapOut, status_code=201)
def create_roadmap(payload: RoadmapCreate, db: Session = Depends(get_db)):
    data = payload.model_dump(mode="json")
    return handlers.create_roadmap(db, data["title"], data["description"], data["category"], data["nodes"])


@router.get("", response_model=List[RoadmapOut])
def get_roadmaps(db: Session = Depends(get_db)):
    return handlers.get_roadmaps(db)


@router.get("/{roadmap_id}", response_model=Optional[RoadmapOut])
def get_roadmap_by_id(roadmap_id: int, db: Session = Depends(get_db)):
    return handlers.get_roadmap_by_id(db, roadmap_id)


# ======================================================
# PROGRESS
# ======================================================
@router.post("/progress", response_model=UserProgressOut)
def update_user_progress(payload: ProgressUpdate, db: Session = Depends(get_db)):
    return handlers.update_user_progress(
        db,
        payload.user_id,
        payload.progress_percentage,
        tutorial_id=payload.tutorial_id,
        roadmap_id=payload.roadmap_id,
        completed_nodes=payload.completed_nodes,
    )


@router.get("/progress/{user_id}", response_model=List[UserProgressOut])
def get_user_progress(user_id: int, db: Session = Depends(get_db)):
    return handlers.get_user_progress(db, user_id)
