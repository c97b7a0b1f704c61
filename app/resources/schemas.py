from datetime import datetime
from typing import Optional

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, Field


class ResourceCreate(BaseModel):
    title: str = Field(..., min_length=3)
    description: str = Field(..., min_length=10)
    category: str = Field(..., min_length=1)
    file_url: AnyHttpUrl
    file_size: int = Field(..., gt=0)
    file_type: str = Field(..., min_length=1)
    thumbnail_url: Optional[AnyHttpUrl] = None
    is_pro: bool = False


class ResourceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    category: str
    file_url: str
    file_size: int
    file_type: str
    thumbnail_url: Optional[str] = None
    is_pro: bool
    download_count: int
    created_at: datetime
    updated_at: datetime
