"""User 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime


class UserSummaryOut(BaseModel):
    user_id: int
    name: str
    avatar: Optional[str] = None
    bio: Optional[str] = None

    model_config = {"from_attributes": True}


class LikerOut(BaseModel):
    user_id: int
    name: str

    model_config = {"from_attributes": True}


class UserOut(BaseModel):
    user_id: int
    name: str
    email: str
    bio: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    github: Optional[str] = None
    linkedin: Optional[str] = None
    avatar: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime]

    model_config = {"from_attributes": True}


class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    github: Optional[str] = None
    linkedin: Optional[str] = None
    avatar: Optional[str] = None


class RegisterRequest(BaseModel):
    name: str
    email: EmailStr
    password: str


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut
