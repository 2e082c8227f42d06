"""Business logic services."""

from app.services.user_service import UserService
from app.services.result_service import ResultService
from app.services.measurement_service import MeasurementService
from app.services.rating_service import RatingService
from app.services.stats_service import StatsService
from app.services.program_service import ProgramService

__all__ = [
    "UserService",
    "ResultService",
    "MeasurementService",
    "RatingService",
    "StatsService",
    "ProgramService",
]
