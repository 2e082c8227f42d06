"""
User repository.

Handles database operations for User model.
"""

from typing import Optional

from sqlmodel import Session, func, select

from app.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, user: User) -> User:
        """
        Create a new user in the database.

        Args:
            user: User instance to create

        Returns:
            Created user with generated id
        """
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address (case-insensitive).

        Args:
            email: User email

        Returns:
            User instance if found, None otherwise
        """
        statement = select(User).where(func.lower(User.email) == email.lower())
        return self.session.exec(statement).first()

    def get_all(self, skip: int = 0, limit: int = 100) -> list[User]:
        """Users ordered by id, with pagination."""
        statement = select(User).order_by(User.id).offset(skip).limit(limit)
        return list(self.session.exec(statement).all())

    def get_active(self) -> list[User]:
        """Every active user; these are the leaderboard participants."""
        statement = select(User).where(User.is_active == True).order_by(User.id)  # noqa: E712
        return list(self.session.exec(statement).all())

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(User)).one()

    def update(self, user: User) -> User:
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def delete(self, user_id: int) -> bool:
        """
        Delete a user by ID.

        Dependent rows must be removed first (see ``UserService.delete_user``).

        Returns:
            True if deleted, False if not found
        """
        user = self.get_by_id(user_id)
        if user:
            self.session.delete(user)
            self.session.commit()
            return True
        return False

    def exists_by_email(self, email: str) -> bool:
        return self.get_by_email(email) is not None
