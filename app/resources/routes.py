from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.projects.schemas import DownloadRequest, DownloadResponse
from app.resources import handlers
from app.resources.schemas import ResourceCreate, ResourceOut
from app.search.schemas import SearchRequest

router = APIRouter(prefix="/resources", tags=["resources"])


@router.post("", response_model=ResourceOut, status_code=201)
def create_resource(payload: ResourceCreate, db: Session = Depends(get_db)):
    return handlers.create_resource(db, **payload.model_dump(mode="json"))


@router.get("", response_model=List[ResourceOut])
def get_resources(db: Session = Depends(get_db)):
    return handlers.get_resources(db)


@router.get("/category/{category}", response_model=List[ResourceOut])
def get_resources_by_category(category: str, db: Session = Depends(get_db)):
    return handlers.get_resources_by_category(db, category)


@router.post("/search", response_model=List[ResourceOut])
def search_resources(payload: SearchRequest, db: Session = Depends(get_db)):
    return handlers.search_resources(db, payload.query, payload.type, payload.filters)


@router.post("/{resource_id}/download", response_model=DownloadResponse)
def download_resource(resource_id: int, payload: DownloadRequest, db: Session = Depends(get_db)):
    return handlers.download_resource(db, resource_id, payload.user_id)
