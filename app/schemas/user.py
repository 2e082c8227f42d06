"""
User API schemas.

Pydantic models for user-related request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.models.user import AvatarType, UserRole


# Shared properties
class UserBase(BaseModel):
    """Base user schema with common fields."""
    email: EmailStr
    name: Optional[str] = Field(None, max_length=255)


# Request schemas
class UserCreate(UserBase):
    """Schema for user registration."""
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")


class UserLogin(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str


class UserUpdate(BaseModel):
    """Profile update. Blank names are ignored."""
    name: Optional[str] = Field(None, max_length=255)
    avatar: Optional[str] = Field(None, max_length=512)
    avatar_type: Optional[AvatarType] = None
    password: Optional[str] = Field(None, min_length=8)


class RoleUpdate(BaseModel):
    role: UserRole


# Response schemas
class UserResponse(BaseModel):
    """Schema for user data in API responses (no sensitive data)."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: EmailStr
    name: str
    display_name: str
    role: UserRole
    avatar: Optional[str] = None
    avatar_type: AvatarType
    is_active: bool
    created_at: datetime
    updated_at: datetime


class UserPublic(BaseModel):
    """What other athletes see on leaderboards and profiles."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    display_name: str
    role: UserRole
    avatar: Optional[str] = None
    avatar_type: AvatarType
