from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.projects.schemas import ProjectOut
from app.resources.schemas import ResourceOut
from app.search import handlers
from app.search.schemas import SearchRequest
from app.tutorials.schemas import TutorialOut

router = APIRouter(prefix="/search", tags=["search"])


class SearchResults(BaseModel):
    tutorials: List[TutorialOut]
    projects: List[ProjectOut]
    resources: List[ResourceOut]


@router.post("", response_model=SearchResults)
def search(payload: SearchRequest, db: Session = Depends(get_db)):
    return handlers.search(db, payload.query, payload.type, payload.filters)
