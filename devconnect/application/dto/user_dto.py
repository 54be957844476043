from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    name: str
    email: EmailStr
    avatar: Optional[str] = None
    date: Optional[datetime] = None


class AuthenticatedUser(BaseModel):
    """Identity attached to a request once its token has been verified"""
    id: str


class MessageResponse(BaseModel):
    """DTO for plain confirmation messages"""
    msg: str
