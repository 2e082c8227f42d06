"""
Progression ("RPG") schemas.

Levels, stat composites, rank titles and per-discipline achievements.
All derived from the result history on read.
"""

from typing import Optional

from pydantic import BaseModel, Field

from app.catalog.disciplines import Discipline, StatType
from app.catalog.standards import StandardLevel


class StandardLookup(BaseModel):
    """Where a raw value sits on a discipline's threshold ladder."""

    level: Optional[StandardLevel] = Field(None, description="Highest level reached (None below the first threshold)")
    next_level: Optional[StandardLevel] = None
    progress: float = Field(0, ge=0, le=100, description="Percent toward the next level")
    points: int = Field(0, description="Base level points plus up to 10 bonus points")


class StatLevel(BaseModel):
    """Composite level of one stat (average of its disciplines' points)."""

    stat: StatType
    name: str
    icon: str
    color: str
    level: int
    progress: int = Field(..., ge=0, le=100)
    discipline_count: int = Field(..., description="Disciplines with a recorded value (0 = no data)")


class RankTitle(BaseModel):
    """Title derived from the overall level."""

    id: str
    name: str
    color: str


class Achievement(BaseModel):
    """Per-discipline achievement row (filled or empty)."""

    discipline: Discipline
    value: Optional[float] = None
    level: Optional[StandardLevel] = None
    next_level: Optional[StandardLevel] = None
    progress: float = 0


class UserStatsResponse(BaseModel):
    """Full progression view of one user."""

    user_id: int
    user_name: str
    overall_level: int
    rank: RankTitle
    stats: list[StatLevel]
    disciplines_with_results: int
    achievements: list[Achievement]
