"""SQLModel database models."""

from app.models.user import User
from app.models.result import Result
from app.models.measurement import Measurement
from app.models.program import BlockRow, Cycle, Phase, Program, Workout, WorkoutBlock

__all__ = [
    "User",
    "Result",
    "Measurement",
    "Program",
    "Cycle",
    "Phase",
    "Workout",
    "WorkoutBlock",
    "BlockRow",
]
