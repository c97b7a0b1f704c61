from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel

from app.auth.schemas import UserOut
from app.challenges.schemas import CertificateOut, UserRankResponse
from app.roadmaps.schemas import UserProgressOut


class DownloadHistoryItem(BaseModel):
    id: int
    title: str
    type: Literal["resource", "project"]
    downloadedAt: datetime


class DashboardData(BaseModel):
    user: UserOut
    progress: List[UserProgressOut]
    recentChatMessages: int
    downloadHistory: List[DownloadHistoryItem]
    userRank: UserRankResponse
    certificates: List[CertificateOut]


class PopularTutorial(BaseModel):
    id: int
    title: str
    views: int


class PopularProject(BaseModel):
    id: int
    title: str
    downloads: int


class Analytics(BaseModel):
    total_users: int
    pro_users: int
    total_downloads: int
    total_ai_queries: int
    daily_active_users: int
    popular_tutorials: List[PopularTutorial]
    popular_projects: List[PopularProject]
