from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class NodePosition(BaseModel):
    x: float
    y: float


class RoadmapNode(BaseModel):
    id: str
    title: str
    description: str
    tutorial_id: Optional[int] = None
    project_id: Optional[int] = None
    position: NodePosition


class RoadmapCreate(BaseModel):
    title: str = Field(..., min_length=5)
    description: str = Field(..., min_length=20)
    category: str = Field(..., min_length=1)
    nodes: List[RoadmapNode]


class RoadmapOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    category: str
    nodes: List[RoadmapNode]
    created_at: datetime
    updated_at: datetime


class ProgressUpdate(BaseModel):
    user_id: int
    tutorial_id: Optional[int] = None
    roadmap_id: Optional[int] = None
    progress_percentage: float = Field(..., ge=0, le=100)
    completed_nodes: Optional[List[str]] = None

    @model_validator(mode="after")
    def require_target(self):
        if self.tutorial_id is None and self.roadmap_id is None:
            raise ValueError("Either tutorial_id or roadmap_id is required")
        return self


class UserProgressOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    tutorial_id: Optional[int] = None
    roadmap_id: Optional[int] = None
    progress_percentage: float
    completed_nodes: List[str]
    created_at: datetime
    updated_at: datetime
