from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.projects import handlers
from app.projects.schemas import DownloadRequest, DownloadResponse, ProjectCreate, ProjectOut
from app.search.schemas import SearchRequest

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("", response_model=ProjectOut, status_code=201)
def create_project(payload: ProjectCreate, db: Session = Depends(get_db)):
    return handlers.create_project(db, **payload.model_dump(mode="json"))


@router.get("", response_model=List[ProjectOut])
def get_projects(db: Session = Depends(get_db)):
    return handlers.get_projects(db)


@router.get("/featured", response_model=List[ProjectOut])
def get_featured_projects(db: Session = Depends(get_db)):
    return handlers.get_featured_projects(db)


@router.post("/search", response_model=List[ProjectOut])
def search_projects(payload: SearchRequest, db: Session = Depends(get_db)):
    return handlers.search_projects(db, payload.query, payload.type, payload.filters)


@router.get("/slug/{slug}", response_model=Optional[ProjectOut])
def get_project_by_slug(slug: str, db: Session = Depends(get_db)):
    return handlers.get_project_by_slug(db, slug)


@router.post("/{project_id}/download", response_model=DownloadResponse)
def download_project(project_id: int, payload: DownloadRequest, db: Session = Depends(get_db)):
    return handlers.download_project(db, project_id, payload.user_id)
