from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    full_name: str = Field(..., min_length=2)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class UserOut(BaseModel):
    """Public view of a user row; the password hash never leaves the server."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    full_name: str
    avatar_url: Optional[str] = None
    subscription_plan: Literal["free", "pro"]
    subscription_expires_at: Optional[datetime] = None
    ai_queries_used_today: int
    created_at: datetime
    updated_at: datetime


class LoginResponse(BaseModel):
    user: UserOut
    token: str
