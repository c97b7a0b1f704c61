from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ContextType = Literal["tutorial", "project", "general"]


class SendMessageRequest(BaseModel):
    user_id: int
    message: str = Field(..., min_length=1, max_length=1000)
    context_type: Optional[ContextType] = None
    context_id: Optional[int] = None


class ChatMessageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    message: str
    response: str
    context_type: Optional[ContextType] = None
    context_id: Optional[int] = None
    created_at: datetime


class UsageLimitResponse(BaseModel):
    canUse: bool
    queriesUsed: int
    limit: int


class TutorialSummaryResponse(BaseModel):
    summary: str
    keyPoints: List[str]
