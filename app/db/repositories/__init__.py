"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.result import ResultRepository
from app.db.repositories.measurement import MeasurementRepository
from app.db.repositories.program import ProgramRepository

__all__ = [
    "UserRepository",
    "ResultRepository",
    "MeasurementRepository",
    "ProgramRepository",
]
