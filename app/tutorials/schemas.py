from datetime import datetime
from typing import List, Optional

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field

from app.search.schemas import Difficulty


class TutorialCreate(BaseModel):
    title: str = Field(..., min_length=5)
    description: str = Field(..., min_length=20)
    content: str = Field(..., min_length=100)
    tech_stack: List[str]
    difficulty: Difficulty
    estimated_time: int = Field(..., gt=0)
    thumbnail_url: Optional[AnyHttpUrl] = None
    is_pro: bool = False


class TutorialOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    slug: str
    description: str
    content: str
    tech_stack: List[str]
    difficulty: Difficulty
    estimated_time: int
    thumbnail_url: Optional[str] = None
    is_pro: bool
    likes_count: int
    views_count: int
    created_at: datetime
    updated_at: datetime


class LikeRequest(BaseModel):
    user_id: int


class LikeResponse(BaseModel):
    liked: bool
    likesCount: int
