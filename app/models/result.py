"""
Personal-record result model.

One row per submitted result.  Rows are never updated; "latest" is the row
with the greatest ``recorded_at``.
"""

import datetime
from typing import Optional

from sqlalchemy import Index
from sqlmodel import Field, SQLModel


class Result(SQLModel, table=True):
    """A single recorded result of a user in a discipline."""

    __tablename__ = "results"
    __table_args__ = (Index("ix_results_user_slug_recorded", "user_id", "discipline_slug", "recorded_at"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    discipline_slug: str = Field(nullable=False, max_length=64)
    value: float = Field(nullable=False)

    # When the result was achieved (UTC)
    recorded_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, nullable=False)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
