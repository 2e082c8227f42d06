"""Shared fixtures.

Required settings get harmless defaults before any ``app`` import, and
service tests run against an in-memory SQLite database.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_PASSWORD", "test")

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401
from app.core.security import get_password_hash
from app.models.user import User, UserRole


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def make_user(session):
    """Factory persisting a user; ``make_user("Ann", admin=True)``."""
    counter = {"n": 0}

    def _make(name: str = "", admin: bool = False, password: str = "password123") -> User:
        counter["n"] += 1
        user = User(email=f"user{counter['n']}@example.com", hashed_password=get_password_hash(password),
                    name=name, role=UserRole.ADMIN if admin else UserRole.USER)
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make
