from typing import List, Literal

from pydantic import BaseModel, Field

from app.dashboard.schemas import Analytics


class GrantProRequest(BaseModel):
    user_id: int
    days: int = Field(..., gt=0)


class ModerateRequest(BaseModel):
    content_id: int
    content_type: Literal["tutorial", "project", "resource"]
    action: Literal["approve", "reject"]


class GrowthPoint(BaseModel):
    date: str
    users: int


class RevenuePoint(BaseModel):
    month: str
    revenue: int


class ContentStats(BaseModel):
    totalTutorials: int
    totalProjects: int
    totalResources: int
    totalChallenges: int


class DetailedAnalytics(Analytics):
    userGrowth: List[GrowthPoint]
    revenueData: List[RevenuePoint]
    contentStats: ContentStats
