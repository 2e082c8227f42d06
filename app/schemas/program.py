"""
Training program API schemas.

A program is a tree: Program → Cycle → Phase → Workout → Block → Row.
Every level is ordered by ``order_index``.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ======================================================================
# Requests
# ======================================================================


class ProgramCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    start_date: datetime.date = Field(..., description="First training day (a Monday for the Mon/Wed/Fri grid)")


class ProgramUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    start_date: Optional[datetime.date] = None


class CycleCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    order_index: int = Field(1, ge=1)
    color: Optional[str] = Field(None, max_length=32)
    smart: bool = Field(False, description="Pre-populate 4 phases × 4 workouts with standard blocks")


class NodeCreate(BaseModel):
    """Phase / workout creation payload."""

    title: str = Field(..., min_length=1, max_length=255)
    order_index: int = Field(1, ge=1)
    color: Optional[str] = Field(None, max_length=32)


class BlockCreate(BaseModel):
    title: Optional[str] = Field(None, max_length=255)
    order_index: int = Field(1, ge=1)


class RowCreate(BaseModel):
    content: str = Field("", max_length=2000)
    prefix: Optional[str] = Field(None, max_length=16)
    order_index: int = Field(1, ge=1)


class NodeUpdate(BaseModel):
    """Partial update for any non-root node; unknown fields for a level are ignored."""

    title: Optional[str] = Field(None, max_length=255)
    order_index: Optional[int] = Field(None, ge=1)
    color: Optional[str] = Field(None, max_length=32)
    content: Optional[str] = Field(None, max_length=2000)
    prefix: Optional[str] = Field(None, max_length=16)


# ======================================================================
# Responses / tree
# ======================================================================


class _Node(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_index: int


class BlockRowRead(_Node):
    block_id: int
    prefix: Optional[str] = None
    content: str = ""


class WorkoutBlockRead(_Node):
    workout_id: int
    title: Optional[str] = None
    rows: list[BlockRowRead] = Field(default_factory=list)


class WorkoutRead(_Node):
    phase_id: int
    title: str
    blocks: list[WorkoutBlockRead] = Field(default_factory=list)


class PhaseRead(_Node):
    cycle_id: int
    title: str
    color: Optional[str] = None
    workouts: list[WorkoutRead] = Field(default_factory=list)


class CycleRead(_Node):
    program_id: int
    title: str
    color: Optional[str] = None
    phases: list[PhaseRead] = Field(default_factory=list)


class ProgramRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    start_date: datetime.date
    is_active: bool
    created_at: datetime.datetime


class ProgramTree(ProgramRead):
    cycles: list[CycleRead] = Field(default_factory=list)


class NodeRef(BaseModel):
    """Identifier and level of a program node."""

    id: int
    level: str


class PhaseLookup(BaseModel):
    """Cycle / phase a calendar day belongs to (all empty outside the program)."""

    cycle: Optional[CycleRead] = None
    phase: Optional[PhaseRead] = None
    color: Optional[str] = None


class ProgramDay(BaseModel):
    """Calendar view of one day in the active program."""

    date: datetime.date
    week_label: str
    is_training_day: bool
    workout_index: Optional[int] = Field(None, description="0-based global workout index")
    cycle_title: Optional[str] = None
    phase_title: Optional[str] = None
    color: Optional[str] = None
    workout: Optional[WorkoutRead] = None
