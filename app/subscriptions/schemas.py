from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


class SubscriptionCreate(BaseModel):
    user_id: int
    plan: Literal["pro"] = "pro"
    duration: Literal["monthly", "annual"]
    payment_method_id: str = Field(..., min_length=1)


class UserIdRequest(BaseModel):
    user_id: int


class SubscriptionResponse(BaseModel):
    success: bool
    subscriptionId: str


class SuccessResponse(BaseModel):
    success: bool


class ProAccessResponse(BaseModel):
    hasProAccess: bool
    expiresAt: Optional[datetime] = None
