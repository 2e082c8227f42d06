"""
User database model.

Defines the User table for authentication and the athlete profile.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class UserRole(str, Enum):
    """Admins (coaches) may act on any athlete; users only on themselves."""
    USER = "user"
    ADMIN = "admin"


class AvatarType(str, Enum):
    EMOJI = "emoji"
    PHOTO = "photo"


class User(SQLModel, table=True):
    """
    Athlete account.

    Stores credentials, role and the cached profile fields shown on
    leaderboards.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    hashed_password: str = Field(nullable=False)

    # Profile
    name: str = Field(default="", max_length=255)
    role: UserRole = Field(default=UserRole.USER)
    avatar: Optional[str] = Field(default=None)
    avatar_type: AvatarType = Field(default=AvatarType.EMOJI)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def display_name(self) -> str:
        """Name shown on leaderboards; falls back to a stable placeholder."""
        if self.name and self.name.strip():
            return self.name
        return f"Пользователь {self.id}"
