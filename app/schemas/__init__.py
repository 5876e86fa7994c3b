"""Pydantic schemas used across the project.

JSON payloads use camelCase keys; snake_case names are accepted on input too.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class TokenData(BaseModel):
    user_id: str
    email: str


class MessageResponse(BaseModel):
    message: str


class SignupRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    username: str = Field(..., min_length=1, max_length=50)
    full_name: str = Field(..., min_length=1, max_length=100)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class UserResponse(CamelModel):
    id: str
    email: str
    username: str
    full_name: str


class AuthResponse(CamelModel):
    token: str
    user: UserResponse


class CurrentUserResponse(CamelModel):
    user: UserResponse


class ScriptGenerateRequest(CamelModel):
    niche: str = Field(..., min_length=1)
    content_type: str = Field(..., min_length=1)
    tone: str = Field(..., min_length=1)
    length: str = Field(..., min_length=1)
    notes: Optional[str] = None


class GeneratedScriptResponse(CamelModel):
    hook: str
    body: str
    cta: str


class ScriptSaveRequest(CamelModel):
    """Save payload; completeness is checked by the script service."""

    title: Optional[str] = None
    niche: Optional[str] = None
    content_type: Optional[str] = None
    tone: Optional[str] = None
    length: Optional[str] = None
    notes: Optional[str] = None
    hook: Optional[str] = None
    body: Optional[str] = None
    cta: Optional[str] = None


class ScriptUpdateRequest(CamelModel):
    title: Optional[str] = None
    niche: Optional[str] = None
    content_type: Optional[str] = None
    tone: Optional[str] = None
    length: Optional[str] = None
    notes: Optional[str] = None
    hook: Optional[str] = None
    body: Optional[str] = None
    cta: Optional[str] = None
    is_favorite: Optional[int] = Field(default=None, ge=0, le=1)


class ScriptResponse(CamelModel):
    id: str
    user_id: str
    title: str
    niche: str
    content_type: str
    tone: str
    length: str
    notes: Optional[str] = None
    hook: str
    body: str
    cta: str
    is_favorite: int
    created_at: datetime
    updated_at: datetime


class CommunityScriptResponse(CamelModel):
    id: str
    script_id: str
    anonymous_username: str
    likes: int
    shares: int
    is_visible: int
    created_at: datetime
    script: ScriptResponse


class UserStatsResponse(CamelModel):
    total_scripts: int
    weekly_scripts: int
    favorite_scripts: int
    success_rate: int


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
