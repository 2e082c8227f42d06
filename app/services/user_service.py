"""
User service.

Business logic for user management, authentication and the
permission policy (admins act on anyone, users only on themselves).
"""

from datetime import datetime, timedelta
from typing import Optional

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.core.config import settings
from app.core.security import create_access_token, get_password_hash, verify_password
from app.db.repositories.measurement import MeasurementRepository
from app.db.repositories.result import ResultRepository
from app.db.repositories.user import UserRepository
from app.models.user import User, UserRole
from app.schemas.token import Token
from app.schemas.user import UserCreate, UserLogin, UserUpdate


# ======================================================================
# Permission policy
# ======================================================================


def can_edit_user(current: User, target_user_id: int) -> bool:
    """Admins may edit anyone; everyone else only themselves."""
    return current.is_admin or current.id == target_user_id


def can_add_results_for(current: User, target_user_id: int) -> bool:
    return can_edit_user(current, target_user_id)


def ensure_can_edit(current: User, target_user_id: int) -> None:
    """Raise 403 unless *current* may act on *target_user_id*."""
    if not can_edit_user(current, target_user_id):
        logger.warning("User {} denied access to user {}", current.id, target_user_id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed to act on this user")


# ======================================================================
# Service
# ======================================================================


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session
        self.repository = UserRepository(session)

    def register(self, user_data: UserCreate) -> User:
        """
        Register a new user.

        The first account ever created becomes an admin when
        ``FIRST_USER_IS_ADMIN`` is set.

        Raises:
            HTTPException: If email already exists
        """
        if self.repository.exists_by_email(user_data.email):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already registered")

        role = UserRole.USER
        if settings.FIRST_USER_IS_ADMIN and self.repository.count() == 0:
            role = UserRole.ADMIN

        name = (user_data.name or "").strip()
        user = User(email=user_data.email.lower(), hashed_password=get_password_hash(user_data.password),
                    name=name, role=role, )
        user = self.repository.create(user)
        logger.info("Registered user {} ({}) as {}", user.id, user.email, user.role.value)
        return user

    def authenticate(self, login_data: UserLogin) -> Token:
        """
        Authenticate user and return access token.

        Raises:
            HTTPException: If credentials are invalid or the account is inactive
        """
        user = self.repository.get_by_email(login_data.email)

        if not user or not verify_password(login_data.password, user.hashed_password):
            logger.warning("Failed login for {}", login_data.email)
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect email or password",
                                headers={ "WWW-Authenticate": "Bearer" }, )

        if not user.is_active:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is inactive")

        access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        access_token = create_access_token(data={ "sub": user.email }, expires_delta=access_token_expires)
        return Token(access_token=access_token, token_type="bearer")

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.repository.get_by_email(email)

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.repository.get_by_id(user_id)

    def get_user_or_404(self, user_id: int) -> User:
        user = self.repository.get_by_id(user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return user

    def list_users(self, skip: int = 0, limit: int = 100) -> list[User]:
        return self.repository.get_all(skip=skip, limit=limit)

    def update_profile(self, current: User, user_id: int, data: UserUpdate) -> User:
        """
        Update name / avatar / password of *user_id*.

        Blank or whitespace-only names are ignored so a profile can never
        lose its name by accident.
        """
        ensure_can_edit(current, user_id)
        user = self.get_user_or_404(user_id)

        if data.name is not None and data.name.strip():
            user.name = data.name.strip()
        if data.avatar is not None:
            user.avatar = data.avatar or None
        if data.avatar_type is not None:
            user.avatar_type = data.avatar_type
        if data.password:
            user.hashed_password = get_password_hash(data.password)

        user.updated_at = datetime.utcnow()
        return self.repository.update(user)

    def set_role(self, current: User, user_id: int, role: UserRole) -> User:
        """Admin only. An admin cannot demote themselves."""
        self._require_admin(current)
        user = self.get_user_or_404(user_id)
        if user.id == current.id and role != UserRole.ADMIN:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot remove your own admin role")
        user.role = role
        user.updated_at = datetime.utcnow()
        user = self.repository.update(user)
        logger.info("User {} set role of user {} to {}", current.id, user.id, role.value)
        return user

    def delete_user(self, current: User, user_id: int) -> None:
        """Admin only. Removes the user's results and measurements as well."""
        self._require_admin(current)
        if user_id == current.id:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot delete yourself")
        self.get_user_or_404(user_id)

        ResultRepository(self.session).delete_by_user(user_id, commit=False)
        MeasurementRepository(self.session).delete_by_user(user_id, commit=False)
        self.repository.delete(user_id)
        logger.info("User {} deleted user {}", current.id, user_id)

    @staticmethod
    def _require_admin(current: User) -> None:
        if not current.is_admin:
            logger.warning("User {} attempted an admin action", current.id)
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin privileges required")
