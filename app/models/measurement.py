"""
Body measurement model.

One row per measured quantity (weight, waist, ...) per submission.
"""

import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class MeasurementType(str, Enum):
    WEIGHT = "weight"  # kg
    HEIGHT = "height"  # cm
    CHEST = "chest"
    WAIST = "waist"
    HIPS = "hips"
    BICEPS = "biceps"
    SHOULDERS = "shoulders"
    GLUTES = "glutes"


class Measurement(SQLModel, table=True):
    """A single body measurement."""

    __tablename__ = "measurements"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    type: MeasurementType = Field(nullable=False)
    value: float = Field(nullable=False)
    recorded_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, nullable=False, index=True)
