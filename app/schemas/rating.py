"""
Leaderboard schemas.

Rows are derived on every read from the result history; nothing here is
persisted.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

UserId = Union[int, str]


class Athlete(BaseModel):
    """Minimal participant view used by the rating engine."""

    model_config = ConfigDict(from_attributes=True)

    id: UserId
    name: str


class DisciplineRow(BaseModel):
    """Standing of one user in one discipline."""

    user_id: UserId
    user_name: str
    value: Optional[float] = Field(None, description="Latest recorded value (None if never recorded)")
    place: Optional[int] = Field(None, description="Competition-ranking place (None without a value)")
    points: float = Field(0.0, description="Tie-averaged points, fractional values possible")


class OverallRow(BaseModel):
    """Standing of one user across all disciplines."""

    user_id: UserId
    user_name: str
    points: float
    place: int


class DisciplineStanding(BaseModel):
    """Per-discipline leaderboard as returned by the API."""

    slug: str
    name: str
    category: str
    unit: str
    direction: str
    rows: list[DisciplineRow]


class RatingsResponse(BaseModel):
    """Overall leaderboard plus per-discipline standings grouped by category."""

    participants: int
    overall: list[OverallRow]
    categories: dict[str, list[DisciplineStanding]]
