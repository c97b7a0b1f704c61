from datetime import datetime
from typing import List, Optional

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field

from app.search.schemas import Difficulty


class ProjectCreate(BaseModel):
    title: str = Field(..., min_length=5)
    description: str = Field(..., min_length=20)
    tech_stack: List[str]
    difficulty: Difficulty
    preview_image_url: Optional[AnyHttpUrl] = None
    demo_url: Optional[AnyHttpUrl] = None
    github_url: Optional[AnyHttpUrl] = None
    guide_pdf_url: Optional[AnyHttpUrl] = None
    is_pro: bool = False


class ProjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    description: str
    tech_stack: List[str]
    difficulty: Difficulty
    preview_image_url: Optional[str] = None
    demo_url: Optional[str] = None
    github_url: Optional[str] = None
    guide_pdf_url: Optional[str] = None
    is_pro: bool
    download_count: int
    created_at: datetime
    updated_at: datetime


class DownloadRequest(BaseModel):
    user_id: int


class DownloadResponse(BaseModel):
    downloadUrl: str
