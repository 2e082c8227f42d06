"""
Training program models.

Program → Cycle → Phase → Workout → WorkoutBlock → BlockRow.  Children are
ordered by ``order_index`` within their parent.  Only one program is
active at a time.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Program(SQLModel, table=True):
    __tablename__ = "programs"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False, max_length=255)
    start_date: datetime.date = Field(nullable=False)
    is_active: bool = Field(default=False, index=True)
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class Cycle(SQLModel, table=True):
    __tablename__ = "cycles"

    id: Optional[int] = Field(default=None, primary_key=True)
    program_id: int = Field(foreign_key="programs.id", nullable=False, index=True)
    title: str = Field(nullable=False, max_length=255)
    color: Optional[str] = Field(default=None, max_length=32)
    order_index: int = Field(default=1)


class Phase(SQLModel, table=True):
    __tablename__ = "phases"

    id: Optional[int] = Field(default=None, primary_key=True)
    cycle_id: int = Field(foreign_key="cycles.id", nullable=False, index=True)
    title: str = Field(nullable=False, max_length=255)
    color: Optional[str] = Field(default=None, max_length=32)
    order_index: int = Field(default=1)
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class Workout(SQLModel, table=True):
    __tablename__ = "workouts"

    id: Optional[int] = Field(default=None, primary_key=True)
    phase_id: int = Field(foreign_key="phases.id", nullable=False, index=True)
    title: str = Field(nullable=False, max_length=255)
    order_index: int = Field(default=1)


class WorkoutBlock(SQLModel, table=True):
    __tablename__ = "workout_blocks"

    id: Optional[int] = Field(default=None, primary_key=True)
    workout_id: int = Field(foreign_key="workouts.id", nullable=False, index=True)
    title: Optional[str] = Field(default=None, max_length=255)  # e.g. "15 min"
    order_index: int = Field(default=1)


class BlockRow(SQLModel, table=True):
    __tablename__ = "block_rows"

    id: Optional[int] = Field(default=None, primary_key=True)
    block_id: int = Field(foreign_key="workout_blocks.id", nullable=False, index=True)
    prefix: Optional[str] = Field(default=None, max_length=16)  # e.g. "A1"
    content: str = Field(default="", max_length=2000)
    order_index: int = Field(default=1)
