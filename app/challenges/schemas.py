from datetime import datetime, timezone
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ChallengeType = Literal["tutorial", "quiz", "project"]


class ChallengeCreate(BaseModel):
    title: str = Field(..., min_length=5)
    description: str = Field(..., min_length=20)
    type: ChallengeType
    points_reward: int = Field(..., gt=0)
    tutorial_id: Optional[int] = None
    project_id: Optional[int] = None
    quiz_data: Optional[Any] = None
    start_date: datetime
    end_date: datetime

    @field_validator("start_date", "end_date")
    @classmethod
    def to_naive_utc(cls, v: datetime) -> datetime:
        # Stored columns are naive UTC
        if v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v

    @model_validator(mode="after")
    def check_window(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class ChallengeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    type: ChallengeType
    points_reward: int
    tutorial_id: Optional[int] = None
    project_id: Optional[int] = None
    quiz_data: Optional[Any] = None
    start_date: datetime
    end_date: datetime
    is_active: bool
    created_at: datetime
    updated_at: datetime


class ParticipateRequest(BaseModel):
    user_id: int


class ParticipateResponse(BaseModel):
    success: bool
    pointsEarned: int


class LeaderboardEntry(BaseModel):
    id: int
    user_id: int
    user_name: str
    user_avatar: Optional[str] = None
    total_points: int
    weekly_points: int
    rank: int
    badges: List[str]
    updated_at: Optional[datetime] = None


class UserRankResponse(BaseModel):
    rank: int
    totalPoints: int
    weeklyPoints: int


class CertificateRequest(BaseModel):
    user_id: int


class CertificateOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    challenge_id: int
    certificate_url: str
    issued_at: datetime
